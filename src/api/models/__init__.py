"""
API models (Pydantic DTOs) for the task rotation API.
"""

from src.api.models.health import HealthResponse
from src.api.models.rotation import (
    CreateTaskRequest,
    CreateUserRequest,
    RotationErrorResponse,
    SeedResponse,
    TaskResponse,
    UserResponse,
)

__all__: list[str] = [
    "CreateTaskRequest",
    "CreateUserRequest",
    "HealthResponse",
    "RotationErrorResponse",
    "SeedResponse",
    "TaskResponse",
    "UserResponse",
]
