"""Text helpers for tokenizing and normalizing corpus words."""

from __future__ import annotations

import string
from typing import Iterable, Iterator

_PUNCTUATION_TABLE = str.maketrans("", "", string.punctuation)


def normalize_word(word: str) -> str:
    """Delete punctuation characters and lowercase the result.

    ``"Don't,"`` becomes ``"dont"``; a token made only of punctuation
    normalizes to the empty string.
    """
    return word.translate(_PUNCTUATION_TABLE).lower()


def is_lone_punctuation(token: str) -> bool:
    """Return True for a single punctuation character standing on its own."""
    return len(token) == 1 and token in string.punctuation


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Yield whitespace-delimited tokens from a stream of lines."""
    for line in lines:
        yield from line.split()
