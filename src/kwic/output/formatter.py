"""KWIC row formatting.

Each row has three fixed-width columns: the pre-context right-justified, the
keyword centred, and the post-context left-justified. Widths are the longest
observed lengths plus a fixed padding.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from kwic.config import FormatConfig
from kwic.index.keyword_index import KeywordIndex
from kwic.index.occurrences import OccurrenceList
from kwic.models import ContextRecord, MaxLengths

NO_WORDS_MESSAGE = "No words found in corpus file!"


@dataclass(frozen=True, slots=True)
class ColumnWidths:
    pre: int
    key: int
    post: int


def column_widths(max_lengths: MaxLengths, config: Optional[FormatConfig] = None) -> ColumnWidths:
    config = config if config is not None else FormatConfig()
    return ColumnWidths(
        pre=max_lengths.pre + config.pre_padding,
        key=max_lengths.key + config.key_padding,
        post=max_lengths.post + config.post_padding,
    )


def center_keyword(keyword: str, width: int) -> str:
    """Centre ``keyword``; an odd leftover space goes before the word."""
    pad_after = max(width - len(keyword), 0) // 2
    pad_before = max(width - pad_after - len(keyword), 0)
    return " " * pad_before + keyword + " " * pad_after


def format_context(context: ContextRecord, widths: ColumnWidths) -> str:
    return (
        context.pre_context.rjust(widths.pre)
        + center_keyword(context.keyword, widths.key)
        + context.post_context.ljust(widths.post)
    )


def format_rows(
    entries: Iterable[Tuple[str, OccurrenceList]], widths: ColumnWidths
) -> Iterator[str]:
    for _word, occurrences in entries:
        for context in occurrences:
            yield format_context(context, widths)


def render_concordance(index: KeywordIndex, config: Optional[FormatConfig] = None) -> Iterator[str]:
    """Yield one formatted line per context, alphabetically by keyword."""
    widths = column_widths(index.max_lengths, config)
    return format_rows(index.traverse(), widths)
