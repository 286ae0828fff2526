"""Base exception classes for the task rotation domain layer."""


class RotationError(Exception):
    """Base exception for all domain errors.

    Expected outcomes (duplicate names, unknown ids, blank input) are never
    raised; they travel back to callers as ServiceResult values. Subclasses of
    this class signal programming errors only.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
