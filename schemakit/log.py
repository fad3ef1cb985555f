"""Logging configuration for schemakit."""

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import colorlog

if TYPE_CHECKING:
    from .config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)8s %(message)s (%(name)s@%(lineno)d)"
COLOR_LOG_FORMAT = (
    "%(asctime)s %(log_color)s%(levelname)8s%(reset)s %(message)s "
    "%(thin)s(%(name)s@%(lineno)d)%(reset)s"
)
DATE_FORMAT = "%m-%d %H:%M:%S"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}
TEST_LOG_FILE = Path("logs", "test", "test.log")


def setup_logging(
    level: int = logging.INFO,
    use_colors: bool = True,
    log_file: Path | None = None,
    overwrite: bool = False,
) -> None:
    """Configure root logging for schemakit.

    Args:
        level: Logging level to use
        use_colors: Whether console output is colored
        log_file: Optional file that receives plain-format records as well
        overwrite: Whether log_file is truncated instead of appended to
    """
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(_make_formatter(use_colors))
    handlers: list[logging.Handler] = [console]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(
            log_file, mode="w" if overwrite else "a", encoding="utf-8"
        )
        file_handler.setFormatter(_make_formatter(use_colors=False))
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)


def setup_logging_from_settings(settings: "Settings") -> None:
    """Configure logging from loaded settings.

    Testing environments write an overwritten test.log, others append to
    schemakit.log, both under settings.log_dir when file logging is on.
    """
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    log_file = None
    if settings.log_to_file:
        file_name = "test.log" if settings.is_testing else "schemakit.log"
        log_file = Path(settings.log_dir) / file_name

    setup_logging(
        level=level,
        use_colors=settings.log_use_colors,
        log_file=log_file,
        overwrite=settings.is_testing,
    )


def setup_test_logging(level: int = logging.DEBUG) -> None:
    """Setup logging for tests with an overwritten log file."""
    setup_logging(level=level, log_file=TEST_LOG_FILE, overwrite=True)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance (typically for __name__)."""
    return logging.getLogger(name)


def _make_formatter(use_colors: bool) -> logging.Formatter:
    if use_colors:
        return colorlog.ColoredFormatter(
            COLOR_LOG_FORMAT, datefmt=DATE_FORMAT, log_colors=LOG_COLORS
        )
    return logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
