"""Logging setup. The terminal belongs to the TUI, so records only ever go to a file."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: Optional[str] = None, level: str = "WARNING") -> logging.Logger:
    """Attach a file handler to the ``courtside`` logger, or a NullHandler without a file."""
    logger = logging.getLogger("courtside")
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    return logger
