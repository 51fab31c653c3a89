"""
Centralized logging configuration for SunTimes.

Logs INFO and DEBUG to stdout, WARNING and ERROR to stderr.
Log level is configurable via LOG_LEVEL environment variable.
"""

import logging
import sys
from typing import Optional, TextIO

from suntimes.config import LOG_LEVEL


FALLBACK_LEVEL = logging.INFO

# Format: "2025-01-15 14:30:45 - suntimes - INFO - Message"
_FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class LevelFilter(logging.Filter):
    """Filter log records by level range."""

    def __init__(self, level_min: int, level_max: int):
        super().__init__()
        self.level_min = level_min
        self.level_max = level_max

    def filter(self, record: logging.LogRecord) -> bool:
        return self.level_min <= record.levelno <= self.level_max


def _stream_handler(stream: TextIO, level_min: int, level_max: Optional[int] = None) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level_min)
    if level_max is not None:
        handler.addFilter(LevelFilter(level_min, level_max))
    handler.setFormatter(_FORMATTER)
    return handler


def resolve_level(name: str) -> Optional[int]:
    """Numeric level for a name such as "debug", or None if unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Configure package-wide logging to stdout/stderr.

    An unknown level name (a typo in LOG_LEVEL) falls back to INFO and
    is reported as a warning instead of failing at import.

    Args:
        level: Log level name, defaults to LOG_LEVEL from config

    Returns:
        Logger instance for suntimes
    """
    logger = logging.getLogger("suntimes")

    # Keep records out of the root logger (uvicorn installs its own handlers)
    logger.propagate = False

    # Remove any existing handlers (for reload safety)
    logger.handlers.clear()
    logger.addHandler(_stream_handler(sys.stdout, logging.DEBUG, logging.INFO))
    logger.addHandler(_stream_handler(sys.stderr, logging.WARNING))

    numeric = resolve_level(level)
    if numeric is None:
        logger.setLevel(FALLBACK_LEVEL)
        logger.warning(f"Unknown log level {level!r}, using {logging.getLevelName(FALLBACK_LEVEL)}")
    else:
        logger.setLevel(numeric)

    return logger


# Global logger instance
logger = setup_logging()
