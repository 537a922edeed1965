"""
Logging configuration.

Thin wrapper over the standard logging module so that every package logs
through the same handler and format.
"""

import logging
import sys

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_ROOT_LOGGER = "hub"

_initialized = False


def init_logging(level: str | int = "INFO") -> None:
    """
    Configure application logging.

    Safe to call more than once; later calls only update the level.

    Args:
        level: Log level name or number.
    """
    global _initialized

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger(_ROOT_LOGGER)
    root.setLevel(level)

    if not _initialized:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)
        _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the application logger hierarchy.

    Args:
        name: Module name, usually ``__name__``.

    Returns:
        Logger instance.
    """
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
