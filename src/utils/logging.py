"""Logging utilities built on top of :mod:`loguru`.

Diagnostics go to stderr so command output on stdout stays machine readable.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = "{time:HH:mm:ss} | {level: <7} | {extra[source]} - {message}"


class LoguruHandler(logging.Handler):
    """Forward standard-library records to loguru, keeping the logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.bind(source=record.name).opt(exception=record.exc_info).log(level, record.getMessage())


def configure_logging(level: str = "INFO") -> None:
    """Configure a loguru stderr sink and route standard logging through it."""

    logger.remove()
    logger.configure(extra={"source": "defaultapps"})
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    logging.basicConfig(handlers=[LoguruHandler()], level=level, force=True)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a standard-library logger tied to loguru."""

    return logging.getLogger(name or __name__)
