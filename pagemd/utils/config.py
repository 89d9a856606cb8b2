"""Configuration management -- reads from environment with sensible defaults."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Centralised settings read once from env vars."""

    # --- Converter defaults ------------------------------------------------
    heading_style: str = field(default_factory=lambda: os.getenv("PAGEMD_HEADING_STYLE", "atx"))
    bullet_list_marker: str = field(
        default_factory=lambda: os.getenv("PAGEMD_BULLET_LIST_MARKER", "-")
    )
    code_block_style: str = field(
        default_factory=lambda: os.getenv("PAGEMD_CODE_BLOCK_STYLE", "fenced")
    )
    em_delimiter: str = field(default_factory=lambda: os.getenv("PAGEMD_EM_DELIMITER", "*"))
    engine: str = field(default_factory=lambda: os.getenv("PAGEMD_ENGINE", "staged"))

    # --- Page content ------------------------------------------------------
    max_content_chars: int = field(
        default_factory=lambda: _env_int("PAGEMD_MAX_CONTENT_CHARS", 10000)
    )
    min_content_chars: int = field(
        default_factory=lambda: _env_int("PAGEMD_MIN_CONTENT_CHARS", 50)
    )
    min_content_words: int = field(
        default_factory=lambda: _env_int("PAGEMD_MIN_CONTENT_WORDS", 10)
    )

    # --- Logging -----------------------------------------------------------
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: os.getenv("LOG_FILE", ""))
    analytics_file: str = field(default_factory=lambda: os.getenv("ANALYTICS_FILE", ""))


# Module-level singleton -- import this everywhere.
settings = Settings()
