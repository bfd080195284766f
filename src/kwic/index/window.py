"""Sliding context window over a stream of normalized words."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence, Tuple

from kwic.models import KEY_SLOT, WINDOW_SIZE, ContextRecord

EMPTY_WINDOW: Tuple[str, ...] = ("",) * WINDOW_SIZE

# Words admitted before the keyword slot and every post-context slot are filled.
_FILL_COUNT = WINDOW_SIZE - KEY_SLOT


def shift_window(slots: Sequence[str]) -> Tuple[str, ...]:
    """Drop the oldest word and open an empty slot at the end."""
    if len(slots) != WINDOW_SIZE:
        raise ValueError(f"Window needs {WINDOW_SIZE} slots, got {len(slots)}")
    return tuple(slots[1:]) + ("",)


class ContextWindow:
    """Eleven-slot buffer that emits a context record per keyword.

    The first six words fill the keyword slot and the five slots after it.
    From the sixth word on, each admitted word lands in the last slot, the
    buffer is emitted with slot 5 as the keyword and then shifted left.
    """

    def __init__(self) -> None:
        self._slots: Tuple[str, ...] = EMPTY_WINDOW
        self._admitted = 0

    @property
    def slots(self) -> Tuple[str, ...]:
        return self._slots

    @property
    def admitted(self) -> int:
        return self._admitted

    def admit(self, word: str) -> Optional[ContextRecord]:
        """Place ``word`` in the window, returning a completed record if any."""
        if not word:
            raise ValueError("Cannot admit an empty word into the context window")

        if self._admitted < _FILL_COUNT:
            slots = list(self._slots)
            slots[self._admitted + KEY_SLOT] = word
            self._slots = tuple(slots)
            self._admitted += 1
        else:
            self._slots = self._slots[:-1] + (word,)

        if self._admitted < _FILL_COUNT:
            return None
        return self._emit()

    def flush(self) -> Iterator[ContextRecord]:
        """Drain the keywords still pending once the stream has ended."""
        while self._slots[KEY_SLOT]:
            yield self._emit()

    def reset(self) -> None:
        self._slots = EMPTY_WINDOW
        self._admitted = 0

    def _emit(self) -> ContextRecord:
        record = ContextRecord(self._slots)
        self._slots = shift_window(self._slots)
        return record


def build_contexts(words: Iterable[str]) -> Iterator[ContextRecord]:
    """Yield one context record per word, in corpus order."""
    window = ContextWindow()
    for word in words:
        record = window.admit(word)
        if record is not None:
            yield record
    yield from window.flush()
