"""
Domain layer - Pure business logic for task rotation.

This layer contains:
- Domain entities (User, RotationTask)
- Value objects (TaskSnapshot, RotationEvent, ServiceResult)
- Domain services (selection, completion, invariant checks)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib, typing and uuid6 imports are allowed.
"""

from src.domain.exceptions import RotationError
from src.domain.models import (
    ErrorKind,
    RotationEvent,
    RotationTask,
    ServiceResult,
    TaskSnapshot,
    TaskState,
    User,
)

__all__: list[str] = [
    "ErrorKind",
    "RotationError",
    "RotationEvent",
    "RotationTask",
    "ServiceResult",
    "TaskSnapshot",
    "TaskState",
    "User",
]
