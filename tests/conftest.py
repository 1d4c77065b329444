"""Shared pytest fixtures and configuration for the romanum test suite.

Guidelines
----------
* Core tests must be pure — no side effects.
* Tests must not depend on OS state: ``ROMANUM_*`` and Rich's
  colour-forcing variables are cleared for every test.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from romanum.utils.logger import PACKAGE_LOGGER


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "ROMANUM_LOWERCASE",
        "ROMANUM_VERBOSE",
        "FORCE_COLOR",
        "TTY_COMPATIBLE",
        "TTY_INTERACTIVE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers bound to a captured stderr from a previous test."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
