"""
Shared helpers.
"""
import logging
import sys
from typing import Dict

from clinic_wellness.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_loggers: Dict[str, logging.Logger] = {}


def get_logger(name: str) -> logging.Logger:
    """
    Get a console logger for a module.

    Loggers are cached so repeated imports never stack handlers.
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    level = "DEBUG" if settings.debug else settings.log_level
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.propagate = False

    _loggers[name] = logger
    return logger
