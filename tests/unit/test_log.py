"""Unit tests for logging functionality."""

import logging
from pathlib import Path

import colorlog

from schemakit import get_logger, setup_logging, setup_logging_from_settings
from schemakit.config import Settings
from schemakit.types import Environment


def _flush_root() -> None:
    for handler in logging.getLogger().handlers:
        handler.flush()


def test_setup_logging_defaults() -> None:
    """Test setup_logging with default parameters."""
    setup_logging()
    root_logger = logging.getLogger()
    assert root_logger.level == logging.INFO
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0].formatter, colorlog.ColoredFormatter)


def test_setup_logging_custom_level() -> None:
    """Test setup_logging with custom level."""
    setup_logging(level=logging.DEBUG)
    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG


def test_setup_logging_without_colors() -> None:
    """Test that plain formatting is used when colors are off."""
    setup_logging(use_colors=False)
    formatter = logging.getLogger().handlers[0].formatter
    assert formatter is not None
    assert not isinstance(formatter, colorlog.ColoredFormatter)


def test_setup_logging_appends_to_file(tmp_path: Path) -> None:
    """Test that a log file is created with parents and appended to."""
    log_file = tmp_path / "nested" / "schemakit.log"

    setup_logging(log_file=log_file)
    get_logger("schemakit.test").warning("first run")
    _flush_root()

    setup_logging(log_file=log_file)
    get_logger("schemakit.test").warning("second run")
    _flush_root()

    text = log_file.read_text()
    assert "first run" in text
    assert "second run" in text
    assert "\033[" not in text


def test_setup_logging_overwrites_file(tmp_path: Path) -> None:
    """Test that overwrite truncates the log file."""
    log_file = tmp_path / "test.log"

    setup_logging(log_file=log_file, overwrite=True)
    get_logger("schemakit.test").warning("stale record")
    _flush_root()

    setup_logging(log_file=log_file, overwrite=True)
    get_logger("schemakit.test").warning("fresh record")
    _flush_root()

    text = log_file.read_text()
    assert "stale record" not in text
    assert "fresh record" in text


def test_setup_logging_from_settings_testing(tmp_path: Path) -> None:
    """Test that testing settings write test.log at the configured level."""
    settings = Settings(
        environment=Environment.TESTING,
        log_level="warning",
        log_use_colors=False,
        log_to_file=True,
        log_dir=str(tmp_path),
    )

    setup_logging_from_settings(settings)

    assert logging.getLogger().level == logging.WARNING
    assert (tmp_path / "test.log").exists()


def test_setup_logging_from_settings_production(tmp_path: Path) -> None:
    """Test that non-testing settings write schemakit.log."""
    settings = Settings(
        environment=Environment.PRODUCTION,
        log_to_file=True,
        log_dir=str(tmp_path),
    )

    setup_logging_from_settings(settings)

    assert (tmp_path / "schemakit.log").exists()
    assert not (tmp_path / "test.log").exists()


def test_setup_logging_from_settings_without_file() -> None:
    """Test that only the console handler is installed by default."""
    setup_logging_from_settings(Settings())
    assert len(logging.getLogger().handlers) == 1


def test_setup_logging_from_settings_unknown_level() -> None:
    """Test that an unknown level name falls back to INFO."""
    setup_logging_from_settings(Settings(log_level="chatty"))
    assert logging.getLogger().level == logging.INFO


def test_get_logger() -> None:
    """Test get_logger returns a logger instance."""
    logger = get_logger("test_logger")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "test_logger"
