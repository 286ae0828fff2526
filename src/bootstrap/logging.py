"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

import os

from src.infrastructure.observability import configure_structlog as _configure_structlog

ENVIRONMENT_VAR = "ENVIRONMENT"
DEFAULT_ENVIRONMENT = "development"


def configure_logging(environment: str | None = None) -> str:
    """Configure structlog from ENVIRONMENT unless one is given.

    Returns:
        The environment name that was applied.
    """
    environment = environment or os.getenv(ENVIRONMENT_VAR, DEFAULT_ENVIRONMENT)
    _configure_structlog(environment=environment)
    return environment


__all__ = ["DEFAULT_ENVIRONMENT", "ENVIRONMENT_VAR", "configure_logging"]
