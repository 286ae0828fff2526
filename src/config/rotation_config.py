"""Task rotation configuration.

This module defines configuration for the periodic rotation sweep and the
completion guard, with environment variable overrides.

Environment Variables:
- TASK_ROTATION_INTERVAL_SECONDS: Sweep interval (default: 120; unset or <= 0
  falls back to 120; 1-4 is raised to 5)
- TASK_MIN_RETENTION_SECONDS: Minimum task age before it may complete
  (default: the sweep interval; 0 or negative disables the guard)
- TASK_ROTATION_ENABLED: Run the background sweep (default: true)
- TASK_ROTATION_SEED_ON_STARTUP: Seed demo users/tasks on startup (default: false)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta


def _get_int_env(key: str, default: int | None) -> int | None:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set.

    Returns:
        True for 1/true/yes/on (any case), False for anything else.
    """
    value = os.environ.get(key)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# =============================================================================
# Rotation Interval
# =============================================================================

# Default time between rotation sweeps (2 minutes)
DEFAULT_ROTATION_INTERVAL_SECONDS = 120

# Floor so the loop cannot be configured into a busy spin
MIN_ROTATION_INTERVAL_SECONDS = 5


def normalize_interval_seconds(seconds: int | None) -> int:
    """Apply the interval fallback and floor rules.

    Args:
        seconds: Raw configured value, or None if unset.

    Returns:
        DEFAULT_ROTATION_INTERVAL_SECONDS for None or values <= 0,
        MIN_ROTATION_INTERVAL_SECONDS for values below the floor,
        the value itself otherwise.
    """
    if seconds is None or seconds <= 0:
        return DEFAULT_ROTATION_INTERVAL_SECONDS
    return max(seconds, MIN_ROTATION_INTERVAL_SECONDS)


@dataclass(frozen=True)
class RotationConfig:
    """Configuration for the rotation scheduler and completion guard.

    Attributes:
        interval_seconds: Seconds between rotation sweeps.
                          Default: 120. Minimum: 5.
        min_retention_seconds: Minimum task age before completion.
                               Default (None): same as interval_seconds.
                               0 disables the guard.
        scheduler_enabled: Whether the API starts the background sweep.
        seed_on_startup: Whether the API seeds demo data on startup.
    """

    interval_seconds: int = DEFAULT_ROTATION_INTERVAL_SECONDS
    min_retention_seconds: int | None = None
    scheduler_enabled: bool = True
    seed_on_startup: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values and resolve the default guard."""
        if self.interval_seconds < MIN_ROTATION_INTERVAL_SECONDS:
            raise ValueError(
                f"interval_seconds must be at least {MIN_ROTATION_INTERVAL_SECONDS}, "
                f"got {self.interval_seconds}"
            )
        if self.min_retention_seconds is None:
            object.__setattr__(self, "min_retention_seconds", self.interval_seconds)
        elif self.min_retention_seconds < 0:
            raise ValueError(
                f"min_retention_seconds must be non-negative, "
                f"got {self.min_retention_seconds}"
            )

    @property
    def interval_timedelta(self) -> timedelta:
        """Get the sweep interval as a timedelta."""
        return timedelta(seconds=self.interval_seconds)

    @property
    def min_retention_timedelta(self) -> timedelta:
        """Get the completion guard as a timedelta."""
        return timedelta(seconds=self.min_retention_seconds or 0)

    @classmethod
    def from_environment(cls) -> RotationConfig:
        """Create config from environment variables with defaults.

        Environment Variables:
            TASK_ROTATION_INTERVAL_SECONDS: Sweep interval (default: 120)
            TASK_MIN_RETENTION_SECONDS: Completion guard (default: interval)
            TASK_ROTATION_ENABLED: Background sweep on/off (default: true)
            TASK_ROTATION_SEED_ON_STARTUP: Demo seeding (default: false)

        Returns:
            RotationConfig with values from environment or defaults.
        """
        interval = normalize_interval_seconds(
            _get_int_env("TASK_ROTATION_INTERVAL_SECONDS", None)
        )

        retention = _get_int_env("TASK_MIN_RETENTION_SECONDS", None)
        if retention is not None:
            # Negative values disable the guard
            retention = max(0, retention)

        return cls(
            interval_seconds=interval,
            min_retention_seconds=retention,
            scheduler_enabled=_get_bool_env("TASK_ROTATION_ENABLED", True),
            seed_on_startup=_get_bool_env("TASK_ROTATION_SEED_ON_STARTUP", False),
        )


# Pre-defined configurations for common use cases

# Default production config
DEFAULT_ROTATION_CONFIG = RotationConfig()

# Testing config: fastest allowed sweep and guard, no background loop
TEST_ROTATION_CONFIG = RotationConfig(
    interval_seconds=MIN_ROTATION_INTERVAL_SECONDS,
    scheduler_enabled=False,
)
