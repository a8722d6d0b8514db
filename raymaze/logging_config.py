"""
Logging Configuration
Sets up the package logger for the application.
"""
import logging
import sys
from typing import Optional


def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'raymaze' namespace.

    The curses view owns the terminal, so console output goes to stderr
    (redirect it with ``2>file``) and only when no log file is given.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("raymaze")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logger.debug("Logging initialized.")
