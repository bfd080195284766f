"""Ordered keyword index with per-word occurrence lists."""

from __future__ import annotations

import bisect
from typing import Dict, Iterator, List, Optional, Tuple

from kwic.index.occurrences import OccurrenceList
from kwic.index.stopwords import StopWordFilter, StopWordSource
from kwic.models import ContextRecord, MaxLengths
from kwic.utils.text import normalize_word


class KeywordIndex:
    """Concordance of normalized words to the contexts they appear in.

    Lookup goes through a dict; alphabetical order is kept in a separate
    sorted key list, so traversal never recurses however the words arrive.
    """

    def __init__(self, stop_words: Optional[StopWordFilter] = None) -> None:
        self.stop_words = stop_words if stop_words is not None else StopWordFilter()
        self.max_lengths = MaxLengths()
        self._entries: Dict[str, OccurrenceList] = {}
        self._keys: List[str] = []

    def exclude_stop_words(self, source: StopWordSource) -> bool:
        """Load stop words; returns whether exclusion is now active."""
        return self.stop_words.load(source)

    def add(self, word: str, context: ContextRecord) -> bool:
        """Record ``context`` under ``word``.

        Returns False when the word is empty or an excluded stop word. Column
        maxima are updated for stop-word contexts as well.
        """
        key = normalize_word(word)
        if not key:
            return False

        if self.stop_words.active and self.stop_words.is_stop_word(key):
            self.max_lengths.update(context)
            return False

        occurrences = self._entries.get(key)
        if occurrences is None:
            occurrences = OccurrenceList()
            self._entries[key] = occurrences
            bisect.insort(self._keys, key)
        occurrences.add(context)
        self.max_lengths.update(context)
        return True

    def traverse(self) -> Iterator[Tuple[str, OccurrenceList]]:
        """Yield ``(word, occurrences)`` pairs in alphabetical order."""
        for key in self._keys:
            yield key, self._entries[key]

    def get(self, word: str) -> Optional[OccurrenceList]:
        return self._entries.get(normalize_word(word))

    def words(self) -> List[str]:
        return list(self._keys)

    def occurrence_count(self) -> int:
        return sum(len(occurrences) for occurrences in self._entries.values())

    def is_empty(self) -> bool:
        return not self._entries

    def clear(self) -> None:
        self._entries.clear()
        self._keys.clear()
        self.max_lengths = MaxLengths()

    def copy(self) -> "KeywordIndex":
        """Return an independent deep copy of the index."""
        clone = KeywordIndex(self.stop_words.copy())
        clone.max_lengths = self.max_lengths.copy()
        clone._entries = {key: occurrences.copy() for key, occurrences in self._entries.items()}
        clone._keys = list(self._keys)
        return clone

    def __deepcopy__(self, memo: dict) -> "KeywordIndex":
        return self.copy()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and normalize_word(word) in self._entries

    def __len__(self) -> int:
        return len(self._entries)
