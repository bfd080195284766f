"""Concordance building pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from kwic.config import AppConfig
from kwic.index.keyword_index import KeywordIndex
from kwic.index.window import ContextWindow
from kwic.models import ContextRecord
from kwic.utils.files import open_corpus
from kwic.utils.text import is_lone_punctuation, iter_tokens, normalize_word

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildStats:
    tokens: int = 0
    skipped: int = 0
    contexts: int = 0
    indexed: int = 0
    excluded: int = 0

    def record(self, added: bool) -> None:
        self.contexts += 1
        if added:
            self.indexed += 1
        else:
            self.excluded += 1


class ConcordanceBuilder:
    """Feeds a token stream through the context window into an index."""

    def __init__(self, index: Optional[KeywordIndex] = None) -> None:
        self.index = index if index is not None else KeywordIndex()

    def build(self, tokens: Iterable[str]) -> BuildStats:
        """Index every word of ``tokens`` with its surrounding context."""
        stats = BuildStats()
        window = ContextWindow()

        for token in tokens:
            stats.tokens += 1
            if is_lone_punctuation(token):
                stats.skipped += 1
                continue
            word = normalize_word(token)
            if not word:
                LOGGER.debug("Skipping punctuation-only token %r", token)
                stats.skipped += 1
                continue
            record = window.admit(word)
            if record is not None:
                self._add(record, stats)

        for record in window.flush():
            self._add(record, stats)

        LOGGER.info(
            "Read %d tokens: %d contexts, %d indexed, %d excluded, %d skipped",
            stats.tokens,
            stats.contexts,
            stats.indexed,
            stats.excluded,
            stats.skipped,
        )
        return stats

    def _add(self, record: ContextRecord, stats: BuildStats) -> None:
        stats.record(self.index.add(record.keyword, record))


def build_concordance(
    corpus_path: Path,
    config: Optional[AppConfig] = None,
    *,
    base_dir: Optional[Path] = None,
) -> KeywordIndex:
    """Build a keyword index for a corpus file.

    Raises CorpusUnreadableError when the corpus cannot be opened. A missing
    stop-word file only disables exclusion.
    """
    config = config if config is not None else AppConfig()
    index = KeywordIndex()

    stop_words_path = config.resolve_stop_words_path(base_dir)
    if index.exclude_stop_words(stop_words_path):
        LOGGER.info("Excluding %d stop words from %s", len(index.stop_words), stop_words_path)
    else:
        LOGGER.info("No stop words in use")

    with open_corpus(corpus_path, encoding=config.encoding) as handle:
        ConcordanceBuilder(index).build(iter_tokens(handle))
    return index
