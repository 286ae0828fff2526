"""Application DTOs (Data Transfer Objects).

These DTOs carry results out of the application layer. They are distinct
from domain models (live, mutable inside a store write) and from API models
(pydantic models for serialization).
"""

from src.application.dtos.rotation import (
    TaskView,
    UserView,
    build_task_view,
    build_user_view,
)

__all__ = [
    "TaskView",
    "UserView",
    "build_task_view",
    "build_user_view",
]
