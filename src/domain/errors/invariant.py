"""Invariant violation errors.

Raised when a write leaves the user/task aggregate in a state the data model
forbids. These are bugs, never user-correctable conditions, so they are
raised rather than returned as a ServiceResult.
"""

from __future__ import annotations

from uuid import UUID

from src.domain.exceptions import RotationError


class InvariantViolationError(RotationError):
    """Raised when the rotation aggregate breaks a data-model invariant.

    Attributes:
        invariant: Short machine-readable name of the broken rule.
        task_id: Task involved, if the rule is task-scoped.
        user_id: User involved, if the rule is user-scoped.
    """

    def __init__(
        self,
        invariant: str,
        message: str,
        *,
        task_id: UUID | None = None,
        user_id: UUID | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            invariant: Short machine-readable name of the broken rule.
            message: Detailed error message.
            task_id: Task involved, if any.
            user_id: User involved, if any.
        """
        self.invariant = invariant
        self.task_id = task_id
        self.user_id = user_id
        super().__init__(f"{invariant}: {message}")
