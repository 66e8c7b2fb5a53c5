"""
Centralized logging configuration for daycast.

Library modules only call ``get_logger(__name__)``; handlers are installed
by the CLI (or the host application) through ``setup_logging``.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    enable_file_logging: bool = False,
) -> logging.Logger:
    """
    Set up console logging and an optional rotating log file.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Path to the log file (defaults to ``daycast.log``).
        enable_file_logging: Whether to add the file handler.

    Returns:
        The configured root logger.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    # stderr so that forecast output on stdout stays clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    if enable_file_logging:
        log_path = Path(log_file or "daycast.log")
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # 5 MB per file, keep 3 backups
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=5 * 1024 * 1024, backupCount=3
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)


def configure_from_env() -> logging.Logger:
    """
    Configure logging from environment variables.

    Environment variables:
        LOG_LEVEL: Logging level (default: INFO)
        LOG_FILE: Log file path; setting it enables file logging
        DISABLE_FILE_LOGGING: Set to force file logging off
    """
    log_file = os.getenv("LOG_FILE")
    return setup_logging(
        level=os.getenv("LOG_LEVEL", "INFO"),
        log_file=log_file,
        enable_file_logging=bool(log_file) and not os.getenv("DISABLE_FILE_LOGGING"),
    )
