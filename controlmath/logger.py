# controlmath/logger.py
import logging
import sys

from controlmath.constants import CONSOLE_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT


def get_logger(name: str = __name__) -> logging.Logger:
    """
    Returns a configured logger instance.

    :param name: Name of the logger (usually __name__ of the module).
    :return: logging.Logger object
    """
    logger = logging.getLogger(name)

    # Prevent adding handlers multiple times (or next to an application-level root handler)
    if logger.hasHandlers():
        return logger

    logger.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(CONSOLE_LOG_LEVEL)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(console_handler)

    return logger
