"""User domain model.

A user is a participant who can hold tasks. Users are created by explicit
registration and are never modified afterwards; the only later change is
removal from the roster.
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from uuid6 import uuid7

MAX_USER_NAME_LENGTH: int = 50


@dataclass(frozen=True, eq=True)
class User:
    """A participant in task rotation.

    Attributes:
        id: Unique identifier (UUIDv7).
        name: Non-empty display name. Unique among live users, ignoring case.
    """

    id: UUID
    name: str

    def __post_init__(self) -> None:
        """Validate User fields."""
        if not self.name or not self.name.strip():
            raise ValueError("User name cannot be empty")

    @classmethod
    def create(cls, name: str) -> User:
        """Create a new user with a fresh UUIDv7 identifier.

        Args:
            name: Display name, already trimmed by the caller.

        Returns:
            New User instance.
        """
        return cls(id=uuid7(), name=name)

    def has_name(self, name: str) -> bool:
        """Check whether this user's name matches, ignoring case."""
        return self.name.casefold() == name.casefold()
