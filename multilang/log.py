"""
multilang/log.py
────────────────
Package logger.

Library modules log through `logging.getLogger(__name__)`, which propagates to
the `multilang` logger configured here. Nothing is attached until an
application calls `configure_logging()`.
"""
import logging
import sys

LOGGER_NAME = "multilang"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(filename)s[:%(lineno)d] - %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a stdout handler to the package logger and set its level."""
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
