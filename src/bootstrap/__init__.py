"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so API and application
layers can depend on ports without importing infrastructure directly.
"""

from src.bootstrap.logging import configure_logging
from src.bootstrap.rotation import RotationContainer, build_rotation_container

__all__ = ["RotationContainer", "build_rotation_container", "configure_logging"]
