"""
Logging configuration for the command line application
"""
import logging
import logging.handlers
from pathlib import Path

from .config import LOG_BACKUP_COUNT, LOG_MAX_BYTES

PACKAGE_LOGGER = "handswipe"


def setup_logging(level="INFO", log_file=None):
    """
    Attach console and optional log file handlers to the package logger

    The console shows messages from the requested level on. The log file
    always records DEBUG, which includes the per-frame rejection reasons.
    Calling it again replaces the handlers of the previous call.

    Returns:
        logging.Logger: the package logger
    """
    console_level = getattr(logging, level.upper(), logging.INFO)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("%(asctime)s  %(levelname)-5s  %(message)s", datefmt="%H:%M:%S"))
    package_logger.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)-7s] %(name)s | %(message)s"))
        package_logger.addHandler(file_handler)

    package_logger.setLevel(logging.DEBUG if log_file else console_level)
    return package_logger
