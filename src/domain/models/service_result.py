"""Result contract returned by every task rotation operation.

Expected failures (blank input, name collisions, unknown ids) are returned,
not raised, so callers can branch on error_kind without exception handling.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Classification of a failed operation.

    Values:
        NONE: The operation succeeded.
        DUPLICATE: Name or title collides with a live entity.
        NOT_FOUND: Referenced entity does not exist.
        INVALID: Malformed input (e.g. blank name).
        LIMIT_REACHED: Reserved. The per-user load cap is enforced by
            leaving full users out of selection, so no operation
            currently returns this kind.
    """

    NONE = "none"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    LIMIT_REACHED = "limit_reached"


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Outcome of a task rotation operation.

    Attributes:
        success: True when the operation succeeded.
        error_kind: ErrorKind.NONE on success, the failure class otherwise.
        message: Human-readable failure reason, None on success.
        value: Operation payload on success, None otherwise.
    """

    success: bool
    error_kind: ErrorKind = ErrorKind.NONE
    message: str | None = None
    value: T | None = None

    def __post_init__(self) -> None:
        """Validate that success and error_kind agree."""
        if self.success and self.error_kind != ErrorKind.NONE:
            raise ValueError("Successful result cannot carry an error kind")
        if not self.success and self.error_kind == ErrorKind.NONE:
            raise ValueError("Failed result must carry an error kind")

    @classmethod
    def ok(cls, value: T | None = None) -> ServiceResult[T]:
        """Create a successful result."""
        return cls(success=True, value=value)

    @classmethod
    def failure(cls, error_kind: ErrorKind, message: str) -> ServiceResult[T]:
        """Create a failed result.

        Args:
            error_kind: The failure classification.
            message: Human-readable reason.

        Returns:
            Failed ServiceResult with no value.
        """
        return cls(success=False, error_kind=error_kind, message=message)
