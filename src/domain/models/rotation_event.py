"""RotationEvent value object emitted by the rotation sweep."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, eq=True)
class RotationEvent:
    """A change of holder for one task during a rotation sweep.

    Attributes:
        task_id: Task whose holder changed.
        from_user_id: Holder before the sweep, None if it was waiting.
        to_user_id: Holder after the sweep, None if the task was released.
    """

    task_id: UUID
    from_user_id: UUID | None
    to_user_id: UUID | None

    @property
    def is_release(self) -> bool:
        """True when the task was taken away without a new holder."""
        return self.to_user_id is None
