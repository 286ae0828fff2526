"""Domain services for task rotation.

Domain services hold the rules that do not belong to a single entity.
They are pure functions over the live aggregate and must NOT depend on
infrastructure.

Available services:
- try_assign / finalize: selection and completion policy
- verify_rotation_invariants: post-write aggregate checks
"""

from src.domain.services.rotation_invariants import verify_rotation_invariants
from src.domain.services.task_rotation_policy import (
    MAX_ACTIVE_TASKS_PER_USER,
    PickIndex,
    active_load,
    eligible_candidates,
    finalize,
    try_assign,
)

__all__ = [
    "MAX_ACTIVE_TASKS_PER_USER",
    "PickIndex",
    "active_load",
    "eligible_candidates",
    "finalize",
    "try_assign",
    "verify_rotation_invariants",
]
