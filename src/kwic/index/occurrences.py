"""Per-keyword list of context occurrences."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from kwic.models import ContextRecord


class OccurrenceList:
    """Append-only contexts of one keyword, in corpus order."""

    __slots__ = ("_records",)

    def __init__(self, records: Optional[Iterable[ContextRecord]] = None) -> None:
        self._records: List[ContextRecord] = list(records) if records is not None else []

    def add(self, context: ContextRecord) -> None:
        self._records.append(context)

    def copy(self) -> "OccurrenceList":
        # Records are frozen, a new list is enough for independence.
        return OccurrenceList(self._records)

    def __deepcopy__(self, memo: dict) -> "OccurrenceList":
        return self.copy()

    def __iter__(self) -> Iterator[ContextRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, position: int) -> ContextRecord:
        return self._records[position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OccurrenceList):
            return NotImplemented
        return self._records == other._records

    def __repr__(self) -> str:
        return f"OccurrenceList({len(self._records)} records)"
