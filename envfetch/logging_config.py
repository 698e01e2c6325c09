"""Loguru-based logging configuration.

Provides:
- Colorized stderr output, kept apart from the report on stdout
- Optional rotated log file
- Intercept handler for standard logging compatibility

Environment Variables:
- ENVFETCH_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR). Default: WARNING
- ENVFETCH_LOG_DIR: Log directory path. Default: unset (no log file)
"""

import logging
import os
import sys
from pathlib import Path

from loguru import logger

LOG_LEVEL = os.environ.get("ENVFETCH_LOG_LEVEL", "WARNING").upper()
_log_dir = os.environ.get("ENVFETCH_LOG_DIR")
LOG_DIR = Path(_log_dir) if _log_dir else None

_logging_configured = False


def setup_logging(level: str | None = None) -> None:
    """Configure Loguru sinks.

    Sets up:
    - Console output (stderr) with colorized format
    - envfetch.log in LOG_DIR when one is configured, rotated at 10 MB
      and retained for 7 days

    Args:
        level: Overrides ENVFETCH_LOG_LEVEL (the CLI passes DEBUG for --verbose)
    """
    global _logging_configured
    if _logging_configured:
        return
    _logging_configured = True

    effective_level = (level or LOG_LEVEL).upper()

    logger.remove()

    logger.add(
        sys.stderr,
        level=effective_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if LOG_DIR is not None:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "envfetch.log",
            level=effective_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="10 MB",
            retention="7 days",
        )


class InterceptHandler(logging.Handler):
    """Forward standard logging records to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)

        # Walk out of the logging module to report the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def intercept_standard_logging() -> None:
    """Redirect all standard logging to Loguru."""
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
