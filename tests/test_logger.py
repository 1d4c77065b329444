"""Tests for logging setup (utils/logger.py)."""

from __future__ import annotations

import logging

from romanum.utils.logger import PACKAGE_LOGGER, set_log_level, setup_logger


class TestSetupLogger:
    def test_returns_package_logger(self) -> None:
        assert setup_logger().name == PACKAGE_LOGGER

    def test_default_level_is_warning(self) -> None:
        assert setup_logger().level == logging.WARNING

    def test_verbose_level_is_debug(self) -> None:
        assert setup_logger(verbose=True).level == logging.DEBUG

    def test_handler_added_once(self) -> None:
        setup_logger()
        logger = setup_logger(verbose=True)
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.DEBUG
        assert logger.propagate is False

    def test_module_loggers_reach_handler(self, capsys) -> None:
        setup_logger(verbose=True)
        logging.getLogger("romanum.core.conversion").debug("hello %s", "there")
        assert "[DEBUG] hello there" in capsys.readouterr().err


class TestSetLogLevel:
    def test_updates_handlers(self) -> None:
        logger = setup_logger()
        set_log_level(logger, logging.ERROR)
        assert logger.level == logging.ERROR
        assert all(h.level == logging.ERROR for h in logger.handlers)
