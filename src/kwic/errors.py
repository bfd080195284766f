"""Exceptions raised by the KWIC pipeline."""

from __future__ import annotations

from pathlib import Path


class KwicError(Exception):
    """Base class for concordance errors."""


class MissingArgumentError(KwicError):
    """The corpus file argument was not supplied."""

    def __init__(self) -> None:
        super().__init__("Missing command line argument for corpus file.")


class CorpusUnreadableError(KwicError):
    """The corpus file does not exist or could not be opened."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Corpus file could not be opened: {self.path} ({reason})")
