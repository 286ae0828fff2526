"""API dependencies for dependency injection."""

from src.api.dependencies.rotation import (
    get_rotation_container,
    get_rotation_scheduler,
    get_rotation_service,
    set_rotation_container,
)

__all__: list[str] = [
    "get_rotation_container",
    "get_rotation_scheduler",
    "get_rotation_service",
    "set_rotation_container",
]
