"""Utility helpers for reading corpus files."""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from kwic.errors import CorpusUnreadableError


def open_corpus(path: Path, *, encoding: str = "utf-8") -> TextIO:
    """Open a corpus file for reading, translating OS errors."""
    path = Path(path)
    if not path.is_file():
        raise CorpusUnreadableError(path, "no such file")
    try:
        return path.open("r", encoding=encoding, errors="replace")
    except OSError as exc:
        raise CorpusUnreadableError(path, exc.strerror or str(exc)) from exc

