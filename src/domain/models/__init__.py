"""Domain models for task rotation.

Contains the entities and value objects that represent core business
concepts. Only RotationTask is mutable; everything else is frozen.
"""

from src.domain.models.rotation_event import RotationEvent
from src.domain.models.rotation_task import (
    MAX_TASK_TITLE_LENGTH,
    RotationTask,
    TaskSnapshot,
    TaskState,
)
from src.domain.models.service_result import ErrorKind, ServiceResult
from src.domain.models.user import MAX_USER_NAME_LENGTH, User

__all__: list[str] = [
    "MAX_TASK_TITLE_LENGTH",
    "MAX_USER_NAME_LENGTH",
    "ErrorKind",
    "RotationEvent",
    "RotationTask",
    "ServiceResult",
    "TaskSnapshot",
    "TaskState",
    "User",
]
