"""Loguru setup for the bot and CLI entrypoints."""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """Replace loguru's default sink with a single stderr sink, once per process."""
    global _configured
    if _configured:
        return
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT, backtrace=True, diagnose=False)
    _configured = True
    logger.debug("Logger initialized at level {}", level)


__all__ = ["configure_logging", "LOG_FORMAT"]
