"""Domain errors for task rotation.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from RotationError.
"""

from src.domain.errors.invariant import InvariantViolationError

__all__: list[str] = ["InvariantViolationError"]
