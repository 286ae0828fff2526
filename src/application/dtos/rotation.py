"""Task rotation DTOs.

Application-layer projections of users and tasks returned by the
TaskRotationService and mapped to API models by the routes.

Architecture Note:
Views are built inside the same store acquisition as the operation that
produced them, so counts and names are consistent with the task states.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.models.rotation_task import TaskState
from src.domain.models.user import User


class _TaskLike(Protocol):
    """Fields shared by RotationTask and TaskSnapshot."""

    id: UUID
    title: str
    created_at: datetime
    state: TaskState
    assigned_user_id: UUID | None
    previous_user_id: UUID | None

    @property
    def assignment_history(self) -> Sequence[UUID]: ...


@dataclass(frozen=True)
class UserView:
    """A user with assignment statistics.

    Attributes:
        id: User identifier.
        name: Display name.
        active_tasks_count: Non-completed tasks the user holds now.
        total_tasks_assigned: Tasks whose history contains the user.
    """

    id: UUID
    name: str
    active_tasks_count: int
    total_tasks_assigned: int


@dataclass(frozen=True)
class TaskView:
    """A task with its assignment metadata.

    Attributes:
        id: Task identifier.
        title: Task title.
        state: Lifecycle state.
        assigned_user_id: Current holder, if any.
        assigned_user_name: Current holder's name, if any.
        previous_user_id: Holder before the current one, if any.
        visited_users_count: Distinct users the task has been assigned to.
        assignment_history: Every assignment, oldest first.
        created_at: Creation timestamp (UTC).
    """

    id: UUID
    title: str
    state: TaskState
    assigned_user_id: UUID | None
    assigned_user_name: str | None
    previous_user_id: UUID | None
    visited_users_count: int
    assignment_history: tuple[UUID, ...]
    created_at: datetime


def build_user_view(user: User, tasks: Iterable[_TaskLike]) -> UserView:
    """Project a user and the task list into a UserView."""
    active = 0
    total = 0
    for task in tasks:
        if task.assigned_user_id == user.id and task.state != TaskState.COMPLETED:
            active += 1
        if user.id in task.assignment_history:
            total += 1
    return UserView(
        id=user.id,
        name=user.name,
        active_tasks_count=active,
        total_tasks_assigned=total,
    )


def build_task_view(task: _TaskLike, users: Iterable[User]) -> TaskView:
    """Project a task and the roster into a TaskView."""
    assigned_name = None
    if task.assigned_user_id is not None:
        assigned_name = next(
            (u.name for u in users if u.id == task.assigned_user_id),
            None,
        )
    history = tuple(task.assignment_history)
    return TaskView(
        id=task.id,
        title=task.title,
        state=task.state,
        assigned_user_id=task.assigned_user_id,
        assigned_user_name=assigned_name,
        previous_user_id=task.previous_user_id,
        visited_users_count=len(set(history)),
        assignment_history=history,
        created_at=task.created_at,
    )
