"""Loguru setup for the application.

Loguru is the only logging backend. Records sent through the stdlib
``logging`` module (Flask's ``app.logger``, Werkzeug's request log) are
intercepted and re-emitted through Loguru so everything shares one format.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger

HUMAN_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "{message}"
)


def setup_logging(level: str = "INFO", json: bool = False) -> None:
    """Replace Loguru's default sink and route stdlib logging into it."""
    logger.remove()

    level = level.upper()
    if json:
        logger.add(sys.stdout, level=level, format="{message}", serialize=True)
    else:
        logger.add(sys.stdout, level=level, format=HUMAN_FORMAT, colorize=True)

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)


class _InterceptHandler(logging.Handler):
    """Forward stdlib ``LogRecord``s to Loguru.

    This is the ``InterceptHandler`` recipe from Loguru's README
    ("Entirely compatible with standard logging").
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip stdlib logging frames so Loguru reports the real caller
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )
