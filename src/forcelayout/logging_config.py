"""
Logging Configuration
Routes the 'forcelayout' logger to the console and, optionally, to a file.
"""
import logging
import os
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "forcelayout"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def shutdown_logging() -> None:
    """Detach and close every handler installed by :func:`setup_logging`."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    level: int = logging.INFO,
    log_file: Union[str, os.PathLike, None] = None,
) -> logging.Logger:
    """
    Configures the logger for the 'forcelayout' namespace.

    Calling it again replaces the previous handlers, closing any open log file.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path the log is also written to. The file is
            truncated on every call.

    Returns:
        The package logger.
    """
    shutdown_logging()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Logging initialized, writing to {os.fspath(log_file)}.")
    else:
        logger.info("Logging initialized.")
    return logger
