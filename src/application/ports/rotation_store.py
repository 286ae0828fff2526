"""Rotation store protocol (the single owner of users and tasks).

The store exposes exactly two access modes, both serialized through one
exclusivity boundary:

- read_snapshot(fn): fn receives point-in-time copies of both collections.
- write(fn): fn receives the live, mutable collections.

No write overlaps another write or a snapshot read. Callbacks are
synchronous and must not perform I/O; domain failures inside a callback are
signalled by its return value, never by aborting the write.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import TypeVar

from src.domain.models.rotation_task import RotationTask, TaskSnapshot
from src.domain.models.user import User

T = TypeVar("T")

SnapshotReader = Callable[[Sequence[User], Sequence[TaskSnapshot]], T]
LiveWriter = Callable[[list[User], list[RotationTask]], T]


class RotationStoreProtocol(ABC):
    """Abstract interface for the user/task aggregate.

    Implementations must construct exactly one instance per running process
    and pass it to every caller; there is no ambient global accessor.
    """

    @abstractmethod
    async def read_snapshot(self, fn: SnapshotReader[T]) -> T:
        """Run fn against a consistent copy of users and tasks.

        Args:
            fn: Reader receiving immutable users and task snapshots.

        Returns:
            Whatever fn returns.
        """
        ...

    @abstractmethod
    async def write(self, fn: LiveWriter[T]) -> T:
        """Run fn with exclusive access to the live collections.

        Args:
            fn: Writer receiving the mutable user and task lists.

        Returns:
            Whatever fn returns.
        """
        ...
