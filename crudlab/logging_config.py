"""
logging_config.py - Centralized Logging Configuration

Sets up Loguru as the single logging backend. Intercepts Python's stdlib
logging module so the getLogger() calls in services/ and startup.py route
through Loguru too.

Business Rules:
- All logs go through Loguru (no print(), no bare stdlib handlers)
- JSON lines when LOG_JSON is set, human-readable with colors otherwise
- uvicorn access and SQLAlchemy engine chatter quieted to WARNING

Called by: main.py (create_app)
Depends on: config.py (log_level, log_json)
"""

import logging
import sys

from loguru import logger

from .config import get_settings


def setup_logging() -> None:
    """Configure Loguru and intercept stdlib logging.

    Safe to call more than once: every call replaces the previous sinks.
    """
    settings = get_settings()
    logger.remove()

    log_level = settings.log_level.upper()

    if settings.log_json:
        logger.add(sys.stdout, level=log_level, format="{message}", serialize=True)
    else:
        logger.add(
            sys.stdout,
            level=log_level,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
                "{message}"
            ),
            colorize=True,
        )

    # Route stdlib logging (services, uvicorn, sqlalchemy) through Loguru
    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    for noisy in ("uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logger.debug("Logging configured at {}", log_level)


class _InterceptHandler(logging.Handler):
    """Route stdlib logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Skip frames from stdlib logging internals so Loguru reports the caller
        frame, depth = logging.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )
