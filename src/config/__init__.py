"""Configuration module for task rotation.

This module provides centralized configuration for various system components.

Available Configurations:
- RotationConfig: Sweep interval, completion guard, startup behaviour
"""

from src.config.rotation_config import (
    DEFAULT_ROTATION_CONFIG,
    DEFAULT_ROTATION_INTERVAL_SECONDS,
    MIN_ROTATION_INTERVAL_SECONDS,
    TEST_ROTATION_CONFIG,
    RotationConfig,
    normalize_interval_seconds,
)

__all__ = [
    "DEFAULT_ROTATION_CONFIG",
    "DEFAULT_ROTATION_INTERVAL_SECONDS",
    "MIN_ROTATION_INTERVAL_SECONDS",
    "RotationConfig",
    "TEST_ROTATION_CONFIG",
    "normalize_interval_seconds",
]
