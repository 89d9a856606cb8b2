"""Utils module -- config, logging."""

from pagemd.utils.config import settings
from pagemd.utils.logger import get_logger, log_conversion, set_log_level

__all__ = ["settings", "get_logger", "log_conversion", "set_log_level"]
