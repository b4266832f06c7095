"""
Centralized logging configuration using Loguru.
Follows Single Responsibility Principle - only handles logging setup.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
)


def _resolve_log_level(settings) -> str:
    """LOG_LEVEL takes precedence over the DEBUG flag."""
    if settings.log_level:
        log_level = settings.log_level.upper()
        if log_level not in LOG_LEVELS:
            log_level = "INFO"
        return log_level
    return "DEBUG" if settings.debug else "INFO"


def _filter_reloader_logs(record) -> bool:
    """Filter out logs from __main__ and __mp_main__ (uvicorn reloader processes)."""
    return record.get("name", "") not in ("__main__", "__mp_main__")


def setup_logger():
    """Configure logger handlers. Only configures once even if called multiple times."""
    from .config import get_settings

    settings = get_settings()
    log_level = _resolve_log_level(settings)

    # Loguru is a singleton, so handlers persist across module reloads.
    # Console + app.log + error.log means we are already configured.
    if len(logger._core.handlers) >= 3:
        return

    logger.remove()

    # Console handler with color
    logger.add(
        sys.stdout,
        colorize=True,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        filter=_filter_reloader_logs,
    )

    # File handler for all logs - always DEBUG level to capture everything
    log_file = Path(settings.log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_file,
        rotation="100 MB",
        retention="30 days",
        compression="zip",
        format=FILE_FORMAT,
        level="DEBUG",
    )

    # Error file handler
    logger.add(
        log_file.with_name("error.log"),
        rotation="100 MB",
        retention="30 days",
        compression="zip",
        format=FILE_FORMAT,
        level="ERROR",
    )


# Configure logger on module import
setup_logger()

__all__ = ["logger"]
