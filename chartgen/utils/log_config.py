"""Loguru sink configuration."""

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"


def configure_logging(level: str = "INFO") -> None:
    """Replace the default sink with a single stderr sink at the given level."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())
