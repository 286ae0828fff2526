"""Structured logging configuration with structlog.

Every service binds `service=<name>` and logs snake_case event names with
key/value context. Output is JSON in production and a coloured console
everywhere else.

Log Entry Format (production):
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "task_reassigned",
        "correlation_id": "...",
        "service": "rotation_scheduler",
        ...additional context
    }

Usage:
    from src.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from src.infrastructure.observability.correlation import correlation_id_processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(level_name: str | None = None) -> int:
    """Translate a level name into a logging level.

    Args:
        level_name: Level such as "debug" or "WARNING". Reads LOG_LEVEL
            when omitted. Unknown names fall back to INFO.

    Returns:
        The logging level integer.
    """
    if level_name is None:
        level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level = getattr(logging, level_name.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(
    environment: str = "production",
    *,
    log_level: str | None = None,
) -> None:
    """Configure structlog for the process.

    Should be called once at application startup.

    Args:
        environment: 'production' for JSON output, anything else for console.
        log_level: Optional level override; LOG_LEVEL is used otherwise.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processors: list[Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [structlog.dev.ConsoleRenderer(colors=True)]

    structlog.configure(
        processors=shared_processors + final_processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            resolve_log_level(log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
