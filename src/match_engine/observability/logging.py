"""Logging for the application layer and CLI.

The pure domain modules never log; feed and liker services log summary counts.

Usage example:
    from match_engine.observability.logging import get_logger

    logger = get_logger("match_engine.feed", level="DEBUG")
    logger.info("Ranked %s of %s candidates", ranked, pool_size)
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def _build_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
    formatter.converter = time.gmtime
    handler.setFormatter(formatter)
    return handler


def get_logger(name: str, *, level: int | str | None = None) -> logging.Logger:
    """Return a logger with one UTC-stamped stream handler.

    Args:
        name: Logger name (use a stable module-qualified name).
        level: Optional level override; the first call defaults to INFO.

    Returns:
        The same logger instance for repeated calls with the same name.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.addHandler(_build_handler())
        logger.setLevel(DEFAULT_LOG_LEVEL)
        logger.propagate = False
    if level is not None:
        logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
