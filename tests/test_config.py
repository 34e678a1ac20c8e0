"""Tests for settings and logging configuration"""

import logging
from typing import Iterator

import pytest

from isoperiod.core.config import Settings
from isoperiod.core.logging_config import PACKAGE_LOGGER, configure_logging, console_handler


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger after each test"""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test default settings"""
    monkeypatch.delenv("ISOPERIOD_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ISOPERIOD_DEBUG", raising=False)

    settings = Settings()

    assert settings.log_level == "WARNING"
    assert settings.debug is False
    assert settings.effective_log_level == "WARNING"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test settings come from ISOPERIOD_ environment variables"""
    monkeypatch.setenv("ISOPERIOD_LOG_LEVEL", "info")
    monkeypatch.delenv("ISOPERIOD_DEBUG", raising=False)

    assert Settings().effective_log_level == "INFO"


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the debug flag overrides the log level"""
    monkeypatch.setenv("ISOPERIOD_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("ISOPERIOD_DEBUG", "true")

    assert Settings().effective_log_level == "DEBUG"


def test_configure_logging_sets_level_and_handler(package_logger: logging.Logger) -> None:
    """Test the package logger gets the configured level and one handler"""
    settings = Settings(log_level="DEBUG", log_format="%(levelname)s %(message)s")

    logger = configure_logging(settings)
    configure_logging(settings)

    assert logger is package_logger
    assert logger.level == logging.DEBUG
    assert logger.handlers.count(console_handler) == 1
    assert console_handler.formatter is not None
    assert console_handler.formatter._fmt == "%(levelname)s %(message)s"
