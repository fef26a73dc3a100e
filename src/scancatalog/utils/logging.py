"""Logging utilities built on top of :mod:`loguru`.

Library modules log through the standard :mod:`logging` API; the CLI routes those
records into a single loguru sink on stderr so stdout only carries command output.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | {message}"


class _LoguruBridge(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = "INFO") -> None:
    """Send stdlib and loguru records to stderr at ``level``."""

    level = level.upper()
    logger.remove()
    logger.add(lambda msg: sys.stderr.write(msg), level=level, format=LOG_FORMAT, colorize=False)
    logging.basicConfig(handlers=[_LoguruBridge()], level=level, force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a standard-library logger tied to loguru."""

    return logging.getLogger(name or "scancatalog")
