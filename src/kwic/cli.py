"""Command line interface for the KWIC concordance."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from kwic.config import DEFAULT_STOP_WORDS_FILE, AppConfig
from kwic.errors import CorpusUnreadableError, MissingArgumentError
from kwic.index.builder import build_concordance
from kwic.output.formatter import NO_WORDS_MESSAGE, render_concordance


console = Console()
err_console = Console(stderr=True, soft_wrap=True)
app = typer.Typer(help="KWIC - keyword-in-context concordance for plain text")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def concordance(
    corpus: Optional[Path] = typer.Argument(None, help="Plain text corpus file."),
    stopwords: Path = typer.Option(
        Path(DEFAULT_STOP_WORDS_FILE),
        "--stopwords",
        help="Stop-word file, resolved against the working directory",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Print the keyword-in-context concordance of a corpus file."""
    _setup_logging(verbose)
    if corpus is None:
        err_console.print(f"[red]{escape(str(MissingArgumentError()))}[/red]")
        raise typer.Exit(code=2)

    config = AppConfig(stop_words_path=stopwords)
    try:
        index = build_concordance(corpus, config, base_dir=Path.cwd())
    except CorpusUnreadableError as exc:
        err_console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if index.is_empty():
        console.print(f"[yellow]{NO_WORDS_MESSAGE}[/yellow]")
        return

    for line in render_concordance(index, config.format):
        typer.echo(line)
