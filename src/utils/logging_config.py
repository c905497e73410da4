"""Logging configuration for the tickerchange CLI."""

import logging
import sys
from pathlib import Path
from typing import TextIO

LOGGER_NAME = "tickerchange"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_level: str = "WARNING",
    log_file: Path | str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the tickerchange logger.

    Ticker lines and JSON own stdout, so console records go to stderr unless
    another stream is given. Calling this again only changes the level.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional log file; parent directories are created.
        stream: Console stream. If None, uses stderr.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level.upper())

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
