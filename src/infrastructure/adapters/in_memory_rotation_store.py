"""In-memory rotation store.

Holds the process-wide list of users and tasks behind a single asyncio.Lock.
Data lives only as long as the process; there is no persistence.

Thread Safety:
- Uses one asyncio.Lock for every read and write (global exclusivity)
- Callbacks are synchronous, so the lock is never held across an await
- Snapshot reads copy both collections before the reader runs

Usage:
    store = InMemoryRotationStore()

    names = await store.read_snapshot(lambda users, tasks: [u.name for u in users])

    def add_user(users, tasks):
        users.append(User.create("Alice"))

    await store.write(add_user)
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import TypeVar

from src.application.ports.rotation_store import (
    LiveWriter,
    RotationStoreProtocol,
    SnapshotReader,
)
from src.domain.models.rotation_task import RotationTask
from src.domain.models.user import User

T = TypeVar("T")


class InMemoryRotationStore(RotationStoreProtocol):
    """Lock-guarded owner of the user and task collections.

    Attributes:
        _users: Live roster, in registration order.
        _tasks: Live task list, in creation order.
    """

    def __init__(
        self,
        users: Iterable[User] | None = None,
        tasks: Iterable[RotationTask] | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            users: Optional initial roster (for tests).
            tasks: Optional initial tasks (for tests).
        """
        self._users: list[User] = list(users or ())
        self._tasks: list[RotationTask] = list(tasks or ())
        self._lock = asyncio.Lock()

    async def read_snapshot(self, fn: SnapshotReader[T]) -> T:
        """Run fn against a point-in-time copy of users and tasks.

        Users are frozen and shared as-is; tasks are copied to TaskSnapshot.

        Args:
            fn: Reader receiving tuples of users and task snapshots.

        Returns:
            Whatever fn returns.
        """
        async with self._lock:
            users = tuple(self._users)
            tasks = tuple(task.to_snapshot() for task in self._tasks)
            return fn(users, tasks)

    async def write(self, fn: LiveWriter[T]) -> T:
        """Run fn with exclusive access to the live collections.

        Args:
            fn: Writer receiving the mutable user and task lists.

        Returns:
            Whatever fn returns.
        """
        async with self._lock:
            return fn(self._users, self._tasks)
