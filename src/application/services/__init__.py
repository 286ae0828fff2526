"""Application services - Use case orchestration.

Available services:
- TaskRotationService: User/task lifecycle, backfill and rotation sweep
- RotationScheduler: Background loop that drives the rotation sweep
"""

from src.application.services.rotation_scheduler import RotationScheduler
from src.application.services.task_rotation_service import (
    DEMO_TASK_TITLES,
    DEMO_USER_NAMES,
    TaskRotationService,
)

__all__ = [
    "DEMO_TASK_TITLES",
    "DEMO_USER_NAMES",
    "RotationScheduler",
    "TaskRotationService",
]
