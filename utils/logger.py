"""
Logging helpers for the operations dashboard.
Engines, the controller and the bus log through module loggers
(``logging.getLogger(__name__)``); entry points call ``configure_logging`` once
so those loggers inherit the configured level and the shared format.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str | None = None, level: int | str = logging.INFO) -> logging.Logger:
    """
    Return the named logger (the root logger when ``name`` is None) with a
    stream handler in the dashboard format attached once, set to ``level``.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Configure the root logger; every module logger propagates to it."""
    return get_logger(None, level=level)
