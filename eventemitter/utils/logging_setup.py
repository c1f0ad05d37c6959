"""Logging setup helpers for applications using the emitter."""

import logging
from pathlib import Path
from typing import Optional

from ..config import LoggingConfig

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(funcName)s - %(message)s'


def setup_logging(level: str = "INFO", log_file: Optional[Path | str] = None) -> None:
    """Configure logging with a console handler and an optional file handler.

    The file handler, when given, records everything down to DEBUG while the
    console only shows ``level`` and above.

    Args:
        level: Console log level name (unknown names fall back to INFO)
        log_file: Optional path of a debug log file
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handlers.append(file_handler)

    logging.basicConfig(
        level=logging.DEBUG if log_file else log_level,
        handlers=handlers,
        force=True
    )


def setup_logging_from_config(config: LoggingConfig) -> None:
    """Configure logging from a ``LoggingConfig`` section."""
    setup_logging(config.level, config.log_file)
