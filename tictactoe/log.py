"""
Logging setup shared by the game and the UI.
"""

import logging
import sys
from typing import Optional

from .config import DEFAULT_LOG_LEVEL, LOG_FORMAT


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    format_string: Optional[str] = None
) -> None:
    """
    Configure root logging to stdout.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses LOG_FORMAT if None)
    """
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level: {level}")

    logging.basicConfig(
        level=numeric,
        format=format_string or LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)]
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for a module (typically called with __name__).
    """
    return logging.getLogger(name)
