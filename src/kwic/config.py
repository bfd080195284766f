"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_STOP_WORDS_FILE = "stopwords.txt"


@dataclass(slots=True)
class FormatConfig:
    """Extra column padding added to the observed maximum lengths."""

    pre_padding: int = 40
    key_padding: int = 10
    post_padding: int = 40


@dataclass(slots=True)
class AppConfig:
    stop_words_path: Path = Path(DEFAULT_STOP_WORDS_FILE)
    encoding: str = "utf-8"
    format: FormatConfig = field(default_factory=FormatConfig)

    def resolve_stop_words_path(self, base_dir: Path | None = None) -> Path:
        if Path(self.stop_words_path).is_absolute() or base_dir is None:
            return Path(self.stop_words_path)
        return base_dir / self.stop_words_path
