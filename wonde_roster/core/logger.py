"""
Centralized logging configuration for the Wonde Roster application.

This module provides a consistent logging setup with an optional rotating
file handler and a console handler writing to stderr, so log lines never
mix with the report printed on stdout.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = 'wonde_roster'


def setup_logging(log_level=logging.WARNING, log_file='wonde_roster.log'):
    """
    Set up application logging.

    Args:
        log_level: The logging level (default: WARNING)
        log_file: The log file path, relative to the working directory.
            An empty value disables file logging.

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(LOGGER_NAME)

    # Prevent adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(log_level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    if log_file:
        log_path = Path(log_file)
        # 10MB max, 5 backup files
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10*1024*1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
