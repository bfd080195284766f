from kwic.cli import app

app(prog_name="kwic")
