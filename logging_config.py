import logging
import os

from config import LOG_PATH

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _file_logger(name: str, filename: str, level: int) -> logging.Logger:
    """Attach a dedicated file handler to the named logger."""
    handler = logging.FileHandler(os.path.join(LOG_PATH, filename), encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()  # Clear any existing handlers
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def setup_logging(verbose: bool = False):
    """Sets up the logging configuration for the command line tool."""

    # Create logs directory if it doesn't exist
    os.makedirs(LOG_PATH, exist_ok=True)

    # Clear all existing handlers to prevent duplication
    logging.getLogger().handlers.clear()

    # set up the root logger for console output only
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Console handler for user-facing output
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    root_logger.addHandler(console_handler)

    # App log is for document loading and misc logs not caught by the search logger
    _file_logger('app', "app.log", logging.INFO)

    # Search log captures DEBUG and above, but only for the 'kmp' logger
    _file_logger('kmp', "kmp.log", logging.DEBUG)
