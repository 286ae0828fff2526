"""RotationTask domain model and its lifecycle states.

A task moves between users until every current user has held it:

    WAITING -> IN_PROGRESS -> WAITING -> ... -> COMPLETED

WAITING is the initial state and COMPLETED is terminal. Transitions are made
only by the selection and completion policy in
src/domain/services/task_rotation_policy.py.

Unlike most domain models, RotationTask is mutable: the store hands the live
objects to a single exclusive writer, which updates them in place. Readers
never see these objects; they receive frozen TaskSnapshot copies instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID

from uuid6 import uuid7

MAX_TASK_TITLE_LENGTH: int = 100


class TaskState(str, Enum):
    """Lifecycle state of a task.

    Values:
        WAITING: Not held by anyone; eligible for assignment.
        IN_PROGRESS: Held by exactly one user.
        COMPLETED: Every current user has held it. Terminal.
    """

    WAITING = "waiting"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(eq=False)
class RotationTask:
    """A unit of work passed between users.

    Attributes:
        id: Unique identifier (UUIDv7).
        title: Descriptive title, unique among live tasks ignoring case.
        created_at: Creation timestamp (UTC).
        state: Current lifecycle state.
        assigned_user_id: Current holder. Set if and only if IN_PROGRESS.
        previous_user_id: Holder before the current one; barred from the
            next selection.
        assignment_history: Every user the task was ever assigned to, in
            order. Only ever appended to.
    """

    id: UUID
    title: str
    created_at: datetime
    state: TaskState = TaskState.WAITING
    assigned_user_id: UUID | None = None
    previous_user_id: UUID | None = None
    assignment_history: list[UUID] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate RotationTask fields."""
        if not self.title or not self.title.strip():
            raise ValueError("RotationTask title cannot be empty")

    @classmethod
    def create(cls, title: str, created_at: datetime) -> RotationTask:
        """Create a new WAITING task with a fresh UUIDv7 identifier.

        Args:
            title: Task title, already trimmed by the caller.
            created_at: Creation timestamp from the time authority.

        Returns:
            New RotationTask instance.
        """
        return cls(id=uuid7(), title=title, created_at=created_at)

    @property
    def is_completed(self) -> bool:
        """Check whether the task has reached its terminal state."""
        return self.state == TaskState.COMPLETED

    @property
    def visited_user_ids(self) -> frozenset[UUID]:
        """Distinct users the task has been assigned to."""
        return frozenset(self.assignment_history)

    def has_title(self, title: str) -> bool:
        """Check whether this task's title matches, ignoring case."""
        return self.title.casefold() == title.casefold()

    def assign_to(self, user_id: UUID) -> None:
        """Hand the task to a new holder.

        The current holder becomes the previous holder and the new holder is
        appended to the history.

        Args:
            user_id: The selected user.
        """
        self.previous_user_id = self.assigned_user_id
        self.assigned_user_id = user_id
        self.state = TaskState.IN_PROGRESS
        self.assignment_history.append(user_id)

    def release(self, *, keep_previous: UUID | None = None) -> None:
        """Return the task to WAITING with no holder.

        Args:
            keep_previous: Value to store as previous_user_id, which keeps
                that user out of the next selection. None clears it.
        """
        self.previous_user_id = keep_previous
        self.assigned_user_id = None
        self.state = TaskState.WAITING

    def unassign(self) -> None:
        """Drop the current holder without touching previous_user_id."""
        self.assigned_user_id = None
        self.state = TaskState.WAITING

    def complete(self) -> None:
        """Move the task to COMPLETED, keeping the last holder as previous."""
        self.previous_user_id = self.assigned_user_id
        self.assigned_user_id = None
        self.state = TaskState.COMPLETED

    def to_snapshot(self) -> TaskSnapshot:
        """Return an immutable copy of the task's current state."""
        return TaskSnapshot(
            id=self.id,
            title=self.title,
            created_at=self.created_at,
            state=self.state,
            assigned_user_id=self.assigned_user_id,
            previous_user_id=self.previous_user_id,
            assignment_history=tuple(self.assignment_history),
        )


@dataclass(frozen=True, eq=True)
class TaskSnapshot:
    """Point-in-time, read-only copy of a RotationTask.

    Attributes mirror RotationTask; assignment_history is a tuple.
    """

    id: UUID
    title: str
    created_at: datetime
    state: TaskState
    assigned_user_id: UUID | None
    previous_user_id: UUID | None
    assignment_history: tuple[UUID, ...]

    @property
    def is_completed(self) -> bool:
        """Check whether the task has reached its terminal state."""
        return self.state == TaskState.COMPLETED

    @property
    def visited_users_count(self) -> int:
        """Number of distinct users the task has been assigned to."""
        return len(set(self.assignment_history))
