"""
Structlog-based logging configuration for the adventure engine.

Modules obtain loggers with ``structlog.get_logger(__name__)`` and log
snake_case events with keyword context. This module only decides where
those events go and how they are rendered.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.stdlib import BoundLogger, LoggerFactory

from adventure.config import Settings, get_settings

LOG_FORMATS = ("console", "json")


def _build_renderer(log_format: str) -> Any:
    """Pick the final structlog renderer for a log format name."""
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        log_format: Either "console" or "json"

    Raises:
        ValueError: If the level or format is not recognised
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unknown log format: {log_format} (must be one of {LOG_FORMATS})")

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level, force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            _build_renderer(log_format),
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=False,
    )


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """Configure logging using the level and format from application settings."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)
