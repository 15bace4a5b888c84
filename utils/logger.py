"""
Logging configuration

All loggers share one set of handlers: a stderr console handler, so JSON
printed on stdout stays clean, and a file handler when LOG_FILE is set.
"""
import logging
import os
import sys
from typing import List

from config.settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

_shared_handlers: List[logging.Handler] = []


def _build_handlers() -> List[logging.Handler]:
    """Create the console and optional file handler once per process"""
    if _shared_handlers:
        return _shared_handlers

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    _shared_handlers.append(console_handler)

    if settings.LOG_FILE:
        log_dir = os.path.dirname(settings.LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(settings.LOG_FILE, encoding='utf-8')
        file_handler.setFormatter(formatter)
        _shared_handlers.append(file_handler)

    return _shared_handlers


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance with configured settings

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger at LOG_LEVEL, attached to the shared handlers
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    for handler in _build_handlers():
        logger.addHandler(handler)

    return logger
