"""Loguru logging configuration shared by the demonstration CLIs.

Call ``setup_logging()`` once at startup to:
- configure the loguru sink (coloured stderr, or JSON lines)
- intercept stdlib ``logging`` records and route them through loguru.
"""

from __future__ import annotations

import logging
import sys

from loguru import logger


class InterceptHandler(logging.Handler):
    """Redirect stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore[assignment]
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(*, level: str = "INFO", json: bool = False) -> None:
    """Configure loguru as the single logging backend.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ...).
        json: If True, emit structured JSON to stderr.
    """
    logger.remove()

    if json:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(
            sys.stderr,
            level=level,
            format=(
                "<green>{time:HH:mm:ss.SSS}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
                "<level>{message}</level>"
            ),
            colorize=True,
        )

    # Intercept the root logger as a catch-all; the loguru sink filters by level
    logging.root.handlers = [InterceptHandler()]
    logging.root.setLevel(logging.DEBUG)
