"""Logging setup shared by the CLI commands."""

from __future__ import annotations

import logging
from pathlib import Path

from jobfixtures.config import LoggingConfig

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
PACKAGE_LOGGER = "jobfixtures"


def configure_logging(logs_root: Path, options: LoggingConfig | None = None) -> logging.Logger:
    """Route records to ``logs_root/<file_name>`` and optionally to the console.

    Existing root handlers are replaced so repeated CLI invocations in one
    process do not duplicate output.
    """

    effective = options or LoggingConfig()
    level = logging.getLevelName(effective.level)
    log_file = logs_root / effective.file_name
    log_file.parent.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(fmt=DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.FileHandler(log_file, encoding="utf-8")]
    if effective.console:
        handlers.append(logging.StreamHandler())
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        root_logger.addHandler(handler)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    return logger
