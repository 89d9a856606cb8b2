"""Structured logging and per-conversion analytics logging."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Set

# Names configured by get_logger, so set_log_level can reach all of them.
_configured: Set[str] = set()


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a configured logger (creates handler only once per name).

    Records go to stderr; stdout carries the converted Markdown.
    """
    from pagemd.utils.config import settings

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    effective_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logger.setLevel(effective_level)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)

    # Optional file handler
    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(fmt))
        logger.addHandler(fh)

    _configured.add(name)
    return logger


def set_log_level(level: str) -> None:
    """Apply *level* to every logger handed out by ``get_logger``."""
    effective_level = getattr(logging, level.upper(), logging.INFO)
    for name in _configured:
        logging.getLogger(name).setLevel(effective_level)


def log_conversion(
    source: str,
    engine: str,
    input_chars: int,
    output_chars: int,
    response_time_ms: float,
    valid: Optional[bool] = None,
) -> None:
    """Append a single conversion record to the JSONL analytics file."""
    from pagemd.utils.config import settings

    if not settings.analytics_file:
        return

    record = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "source": source,
        "engine": engine,
        "input_chars": input_chars,
        "output_chars": output_chars,
        "response_time_ms": round(response_time_ms, 1),
        "valid": valid,
    }

    path = Path(settings.analytics_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write(json.dumps(record) + "\n")
