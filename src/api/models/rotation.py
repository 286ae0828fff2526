"""Task rotation API request/response models.

Pydantic models for the users, tasks and seed endpoints.

Validation Split:
- Length limits are enforced here and fail with 422
- Empty and whitespace-only names and titles pass schema validation and are
  rejected by the engine with 400, after trimming
"""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, Field, PlainSerializer

from src.application.dtos.rotation import TaskView, UserView
from src.domain.models.rotation_task import MAX_TASK_TITLE_LENGTH, TaskState
from src.domain.models.user import MAX_USER_NAME_LENGTH

# ISO 8601 with Z suffix
DateTimeWithZ = Annotated[
    datetime,
    PlainSerializer(
        lambda v: v.isoformat().replace("+00:00", "Z") if v else None, return_type=str
    ),
]


class CreateUserRequest(BaseModel):
    """Request to register a user.

    Attributes:
        name: Display name (at most 50 characters), unique ignoring case.
    """

    name: str = Field(
        ...,
        max_length=MAX_USER_NAME_LENGTH,
        description="Display name, unique ignoring case",
    )


class UserResponse(BaseModel):
    """A user with assignment statistics.

    Attributes:
        id: User identifier.
        name: Display name.
        active_tasks_count: Non-completed tasks the user holds now (max 3).
        total_tasks_assigned: Tasks that have ever been assigned to the user.
    """

    id: UUID
    name: str
    active_tasks_count: int
    total_tasks_assigned: int

    @classmethod
    def from_view(cls, view: UserView) -> "UserResponse":
        """Build the response from an application view."""
        return cls(
            id=view.id,
            name=view.name,
            active_tasks_count=view.active_tasks_count,
            total_tasks_assigned=view.total_tasks_assigned,
        )


class CreateTaskRequest(BaseModel):
    """Request to create a task.

    Attributes:
        title: Task title (at most 100 characters), unique ignoring case.
    """

    title: str = Field(
        ...,
        max_length=MAX_TASK_TITLE_LENGTH,
        description="Task title, unique ignoring case",
    )


class TaskResponse(BaseModel):
    """A task with its assignment metadata.

    Attributes:
        id: Task identifier.
        title: Task title.
        state: waiting, in_progress or completed.
        assigned_user_id: Current holder, if any.
        assigned_user_name: Current holder's name, if any.
        previous_user_id: Holder before the current one, if any.
        visited_users_count: Distinct users the task has been assigned to.
        assignment_history: Every assignment, oldest first.
        created_at: Creation time (ISO 8601).
    """

    id: UUID
    title: str
    state: TaskState
    assigned_user_id: UUID | None = None
    assigned_user_name: str | None = None
    previous_user_id: UUID | None = None
    visited_users_count: int
    assignment_history: list[UUID] = Field(default_factory=list)
    created_at: DateTimeWithZ

    @classmethod
    def from_view(cls, view: TaskView) -> "TaskResponse":
        """Build the response from an application view."""
        return cls(
            id=view.id,
            title=view.title,
            state=view.state,
            assigned_user_id=view.assigned_user_id,
            assigned_user_name=view.assigned_user_name,
            previous_user_id=view.previous_user_id,
            visited_users_count=view.visited_users_count,
            assignment_history=list(view.assignment_history),
            created_at=view.created_at,
        )


class SeedResponse(BaseModel):
    """Outcome of a demo seeding request.

    Attributes:
        seeded: False when the store already held data.
    """

    seeded: bool


class RotationErrorResponse(BaseModel):
    """Error response for rotation operations (RFC 7807).

    Attributes:
        type: Error type URI.
        title: Human-readable error title.
        status: HTTP status code.
        detail: Detailed error message.
        instance: Request path that caused the error.
    """

    type: str = Field(..., description="Error type URI")
    title: str = Field(..., description="Human-readable error title")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Detailed error message")
    instance: str = Field(..., description="Request path that caused the error")
