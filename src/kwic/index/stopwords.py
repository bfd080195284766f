"""Stop-word exclusion for the keyword index."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

from kwic.utils.text import iter_tokens, normalize_word

LOGGER = logging.getLogger(__name__)

StopWordSource = Union[Path, str, Iterable[str]]


class StopWordFilter:
    """Set of normalized words that never become index keys.

    The filter stays inactive, answering False to every query, until a
    source with at least one word has been loaded.
    """

    def __init__(self, words: Iterable[str] | None = None) -> None:
        self._words: set[str] = set()
        if words is not None:
            self._add_tokens(words)

    @property
    def active(self) -> bool:
        return bool(self._words)

    def load(self, source: StopWordSource) -> bool:
        """Read whitespace-separated stop words from a file path or lines.

        Returns whether at least one word was loaded. A missing or unreadable
        file is not an error; exclusion simply stays disabled.
        """
        if isinstance(source, (str, Path)):
            path = Path(source)
            try:
                with path.open("r", encoding="utf-8", errors="replace") as handle:
                    self._add_tokens(iter_tokens(handle))
            except OSError as exc:
                LOGGER.debug("Stop-word file %s unavailable: %s", path, exc)
                return False
        else:
            self._add_tokens(iter_tokens(source))

        if not self._words:
            LOGGER.debug("No stop words loaded, exclusion disabled")
            return False
        LOGGER.debug("Loaded %d stop words", len(self._words))
        return True

    def _add_tokens(self, tokens: Iterable[str]) -> None:
        for token in tokens:
            word = normalize_word(token)
            if word:
                self._words.add(word)

    def is_stop_word(self, word: str) -> bool:
        """Exact membership test; ``word`` must already be normalized."""
        return word in self._words

    def copy(self) -> "StopWordFilter":
        clone = StopWordFilter()
        clone._words = set(self._words)
        return clone

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)
