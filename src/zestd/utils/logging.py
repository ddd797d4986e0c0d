import logging
import os
import colorlog
from typing import Dict, Optional

# Define log levels
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}

DEFAULT_COLOR_LOG_FORMAT = "%(log_color)s%(asctime)s [%(name)s] %(levelname)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Keep track of configured loggers
CONFIGURED_LOGGERS: Dict[str, logging.Logger] = {}


def setup_logger(name: str, log_level: str = "INFO") -> logging.Logger:
    """
    Set up a logger with colorful console output.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    log_level = log_level.upper()
    level = LOG_LEVELS.get(log_level, logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Replace handlers so repeated setup does not duplicate output
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(colorlog.ColoredFormatter(
        DEFAULT_COLOR_LOG_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
        log_colors=LOG_COLORS
    ))
    logger.addHandler(console_handler)

    if log_level not in LOG_LEVELS:
        logger.warning(f"Invalid log level: {log_level}. Using INFO instead.")

    CONFIGURED_LOGGERS[name] = logger
    return logger


def get_log_level() -> str:
    """Get the log level from environment variable or use default."""
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the specified name and log level.

    Loggers are configured once and reused on later calls unless an
    explicit level is requested.
    """
    if log_level is None:
        if name in CONFIGURED_LOGGERS:
            return CONFIGURED_LOGGERS[name]
        log_level = get_log_level()

    return setup_logger(name, log_level)
