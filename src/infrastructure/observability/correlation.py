"""Correlation ID management for request tracing.

The LoggingMiddleware sets a correlation id per request; the structlog
processor below copies it into every log entry emitted while that request
is being handled, including entries from the rotation engine.

Log entries from the background rotation scheduler carry no correlation id.
"""

from contextvars import ContextVar
from typing import Any

from uuid6 import uuid7

# Empty string means "not inside a request"
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new time-ordered correlation ID."""
    return str(uuid7())


def get_correlation_id() -> str:
    """Get the current correlation ID, or an empty string if unset."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current context.

    Args:
        correlation_id: The correlation ID to set.
    """
    _correlation_id.set(correlation_id)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor that adds correlation_id when one is set.

    Args:
        logger: Unused, required by structlog.
        method_name: Unused, required by structlog.
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict
