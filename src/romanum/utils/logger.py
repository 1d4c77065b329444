"""Logging setup for romanum.

All modules log through ``logging.getLogger(__name__)``; this module
configures the shared ``romanum`` package logger once, so records from
every sub-module end up on the same stderr handler.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["PACKAGE_LOGGER", "setup_logger", "set_log_level"]

PACKAGE_LOGGER = "romanum"
USER_LOG_LEVEL = logging.WARNING  # Only warnings and errors unless verbose
VERBOSE_LOG_LEVEL = logging.DEBUG
SIMPLE_FORMAT = "[%(levelname)s] %(message)s"


def setup_logger(verbose: bool = False) -> logging.Logger:
    """Configure and return the ``romanum`` package logger.

    A stderr handler is attached only the first time; later calls just
    adjust the level, so repeated CLI invocations in one process (tests)
    never duplicate output.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = VERBOSE_LOG_LEVEL if verbose else USER_LOG_LEVEL

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=SIMPLE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    set_log_level(logger, level)
    return logger


def set_log_level(logger: logging.Logger, level: int) -> None:
    """Change the level of *logger* and every handler attached to it."""
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)
