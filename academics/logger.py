# academics/logger.py
import logging
import sys

from .config import LOGGER_NAME, LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT

_logger = logging.getLogger(LOGGER_NAME)
if not _logger.handlers:
    _logger.setLevel(LOG_LEVEL)
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def get_logger(name: str | None = None) -> logging.Logger:
    if name:
        return _logger.getChild(name)
    return _logger
