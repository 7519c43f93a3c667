"""logger.py - Logger factory and opt-in console logging for bucketstore"""

from __future__ import annotations

import logging
from typing import IO

from .constants import LOG_FORMAT

PACKAGE_LOGGER = "bucketstore"

_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a bucketstore module."""
    return logging.getLogger(name)


def configure_logging(level: int | str = "INFO", stream: IO[str] | None = None) -> None:
    """Attach a console handler to the package logger.

    Calling this again swaps the handler instead of stacking a second one,
    so repeated CLI invocations in one process do not duplicate output.
    """
    global _handler
    if isinstance(level, str):
        level = level.upper()
    root = logging.getLogger(PACKAGE_LOGGER)
    # Rejects unknown level names before the current handler is touched
    root.setLevel(level)
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(_handler)
