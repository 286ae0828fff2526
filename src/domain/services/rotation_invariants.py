"""Invariant verification for the user/task aggregate.

verify_rotation_invariants is run after every engine write. A failure means
the engine has a bug, so it raises InvariantViolationError instead of
returning a result.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.domain.errors.invariant import InvariantViolationError
from src.domain.models.rotation_task import RotationTask, TaskState
from src.domain.models.user import User
from src.domain.services.task_rotation_policy import (
    MAX_ACTIVE_TASKS_PER_USER,
    active_load,
)


def verify_rotation_invariants(
    users: Sequence[User],
    tasks: Sequence[RotationTask],
) -> None:
    """Check every data-model invariant over the whole aggregate.

    Args:
        users: Live roster.
        tasks: Live task list.

    Raises:
        InvariantViolationError: On the first broken invariant found.
    """
    seen_names: set[str] = set()
    for user in users:
        key = user.name.casefold()
        if key in seen_names:
            raise InvariantViolationError(
                "unique_user_name",
                f"duplicate user name {user.name!r}",
                user_id=user.id,
            )
        seen_names.add(key)

    seen_titles: set[str] = set()
    for task in tasks:
        _verify_task(task)
        if task.is_completed:
            continue
        key = task.title.casefold()
        if key in seen_titles:
            raise InvariantViolationError(
                "unique_task_title",
                f"duplicate live task title {task.title!r}",
                task_id=task.id,
            )
        seen_titles.add(key)

    for user_id, count in active_load(tasks).items():
        if count > MAX_ACTIVE_TASKS_PER_USER:
            raise InvariantViolationError(
                "load_cap",
                f"user holds {count} active tasks (max {MAX_ACTIVE_TASKS_PER_USER})",
                user_id=user_id,
            )


def _verify_task(task: RotationTask) -> None:
    if (task.assigned_user_id is not None) != (task.state == TaskState.IN_PROGRESS):
        raise InvariantViolationError(
            "assignee_iff_in_progress",
            f"state={task.state.value} assigned_user_id={task.assigned_user_id}",
            task_id=task.id,
        )
    if task.assigned_user_id is not None and (
        not task.assignment_history
        or task.assignment_history[-1] != task.assigned_user_id
    ):
        raise InvariantViolationError(
            "history_records_assignee",
            "current assignee is not the latest history entry",
            task_id=task.id,
        )
