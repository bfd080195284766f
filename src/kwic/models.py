"""Core KWIC data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

CONTEXT_RADIUS = 5
KEY_SLOT = CONTEXT_RADIUS
WINDOW_SIZE = 2 * CONTEXT_RADIUS + 1


@dataclass(frozen=True, slots=True)
class ContextRecord:
    """Eleven words around one keyword occurrence.

    Slots 0-4 hold the words before the keyword, slot 5 the keyword and
    slots 6-10 the words after it. Positions beyond the corpus edges are
    empty strings.
    """

    words: Tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.words) != WINDOW_SIZE:
            raise ValueError(
                f"Context record needs {WINDOW_SIZE} slots, got {len(self.words)}"
            )

    @classmethod
    def from_parts(cls, pre: list[str], keyword: str, post: list[str]) -> "ContextRecord":
        """Build a record from up to five words on either side of a keyword."""
        if len(pre) > CONTEXT_RADIUS or len(post) > CONTEXT_RADIUS:
            raise ValueError(f"At most {CONTEXT_RADIUS} context words per side")
        padded_pre = [""] * (CONTEXT_RADIUS - len(pre)) + list(pre)
        padded_post = list(post) + [""] * (CONTEXT_RADIUS - len(post))
        return cls(tuple(padded_pre + [keyword] + padded_post))

    @property
    def keyword(self) -> str:
        return self.words[KEY_SLOT]

    @property
    def pre_words(self) -> Tuple[str, ...]:
        return self.words[:KEY_SLOT]

    @property
    def post_words(self) -> Tuple[str, ...]:
        return self.words[KEY_SLOT + 1 :]

    @property
    def pre_context(self) -> str:
        return " ".join(word for word in self.pre_words if word)

    @property
    def post_context(self) -> str:
        return " ".join(word for word in self.post_words if word)

    @property
    def pre_length(self) -> int:
        return sum(len(word) for word in self.pre_words)

    @property
    def key_length(self) -> int:
        return len(self.keyword)

    @property
    def post_length(self) -> int:
        return sum(len(word) for word in self.post_words)


@dataclass(slots=True)
class MaxLengths:
    """Running maxima of pre-context, keyword and post-context lengths."""

    pre: int = 0
    key: int = 0
    post: int = 0

    def update(self, context: ContextRecord) -> None:
        self.pre = max(self.pre, context.pre_length)
        self.key = max(self.key, context.key_length)
        self.post = max(self.post, context.post_length)

    def copy(self) -> "MaxLengths":
        return MaxLengths(self.pre, self.key, self.post)
