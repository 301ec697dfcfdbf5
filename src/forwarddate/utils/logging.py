"""structlog configuration shared by the app and scripts."""
from __future__ import annotations

import logging
import sys

import structlog

from forwarddate.config import get_settings


def setup_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """
    Configure stdlib logging and structlog.

    Args:
        level: Log level name, defaults to ``Settings.log_level``
        json_logs: Render JSON lines instead of the console format,
            defaults to ``Settings.log_json``
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    if json_logs is None:
        json_logs = settings.log_json

    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
