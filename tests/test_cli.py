"""Tests for the command line interface."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from kwic.cli import _setup_logging, app
from kwic.errors import CorpusUnreadableError


runner = CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each command from an isolated working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestSetupLogging:
    """Tests for _setup_logging helper."""

    def test_setup_logging_verbose(self) -> None:
        """Verbose mode sets DEBUG level."""
        with patch("kwic.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=True)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.DEBUG

    def test_setup_logging_normal(self) -> None:
        """Normal mode only reports warnings."""
        with patch("kwic.cli.logging.basicConfig") as mock_config:
            _setup_logging(verbose=False)
            mock_config.assert_called_once()
            assert mock_config.call_args[1]["level"] == logging.WARNING


class TestArguments:
    """Tests for argument validation."""

    def test_missing_corpus_argument(self, workdir: Path) -> None:
        result = runner.invoke(app, [])

        assert result.exit_code != 0
        assert "Missing command line argument for corpus file." in result.output

    def test_too_many_arguments(self, workdir: Path) -> None:
        (workdir / "one.txt").write_text("a")
        (workdir / "two.txt").write_text("b")

        result = runner.invoke(app, ["one.txt", "two.txt"])

        assert result.exit_code != 0

    def test_missing_corpus_file(self, workdir: Path) -> None:
        result = runner.invoke(app, [str(workdir / "missing.txt")])

        assert result.exit_code == 1
        assert "could not be opened" in result.output

    def test_long_corpus_path_not_wrapped(self, workdir: Path) -> None:
        """Error lines stay on one line whatever the path length."""
        missing = workdir.joinpath(*["nested-directory"] * 8) / "missing-corpus.txt"

        result = runner.invoke(app, [str(missing)])

        assert result.exit_code == 1
        assert f"Corpus file could not be opened: {missing} (no such file)" in result.output

    def test_unreadable_corpus_is_reported(self, workdir: Path) -> None:
        corpus = workdir / "corpus.txt"
        corpus.write_text("words")

        with patch(
            "kwic.cli.build_concordance",
            side_effect=CorpusUnreadableError(corpus, "Permission denied"),
        ):
            result = runner.invoke(app, [str(corpus)])

        assert result.exit_code == 1
        assert "Permission denied" in result.output


class TestConcordanceOutput:
    """Tests for the printed concordance."""

    def test_prints_sorted_rows(self, workdir: Path) -> None:
        corpus = workdir / "corpus.txt"
        corpus.write_text("Dogs chase cats. Cats chase mice!\n")

        result = runner.invoke(app, [str(corpus)])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert len(lines) == 6
        # six words: every context spans the whole corpus
        for line in lines:
            assert line.split() == ["dogs", "chase", "cats", "cats", "chase", "mice"]
        assert all(len(line) == len(lines[0]) for line in lines)

    def test_rows_follow_keyword_order(self, workdir: Path) -> None:
        corpus = workdir / "corpus.txt"
        corpus.write_text("b a")

        result = runner.invoke(app, [str(corpus)])

        lines = result.stdout.splitlines()
        # max lengths (1, 1, 1): columns 41, 11, 41
        assert lines == [
            " " * 40 + "b" + " " * 5 + "a" + " " * 5 + " " * 41,
            " " * 41 + " " * 5 + "b" + " " * 5 + "a" + " " * 40,
        ]

    def test_uses_stopwords_from_working_directory(self, workdir: Path) -> None:
        (workdir / "stopwords.txt").write_text("the\na\n")
        corpus = workdir / "corpus.txt"
        corpus.write_text("the cat sat")

        result = runner.invoke(app, [str(corpus)])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert len(lines) == 2
        assert lines[0].split() == ["the", "cat", "sat"]
        assert lines[1].split() == ["the", "cat", "sat"]

    def test_stopwords_option(self, workdir: Path) -> None:
        stop_file = workdir / "custom.txt"
        stop_file.write_text("sat")
        corpus = workdir / "corpus.txt"
        corpus.write_text("the cat sat")

        result = runner.invoke(app, [str(corpus), "--stopwords", str(stop_file)])

        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 2

    def test_empty_corpus_message(self, workdir: Path) -> None:
        corpus = workdir / "corpus.txt"
        corpus.write_text("\n  - ; \n")

        result = runner.invoke(app, [str(corpus)])

        assert result.exit_code == 0
        assert "No words found in corpus file!" in result.stdout

    def test_verbose_flag_accepted(self, workdir: Path) -> None:
        corpus = workdir / "corpus.txt"
        corpus.write_text("word")

        result = runner.invoke(app, [str(corpus), "-v"])

        assert result.exit_code == 0

    def test_empty_stopwords_file_is_silent(self, workdir: Path) -> None:
        """An empty stop-word file disables exclusion without any warning."""
        (workdir / "stopwords.txt").write_text("   \n")
        corpus = workdir / "corpus.txt"
        corpus.write_text("the cat")

        result = runner.invoke(app, [str(corpus)])

        assert result.exit_code == 0
        assert "WARNING" not in result.output
        assert len(result.stdout.splitlines()) == 2
