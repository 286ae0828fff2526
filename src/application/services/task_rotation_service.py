"""TaskRotationService - the assignment engine.

This module owns every rule that changes who holds which task:
- user registration and removal, each followed by a backfill pass
- task creation with immediate assignment
- the rotation sweep that moves every open task to a new holder
- demo data seeding

Concurrency:
- Every public operation makes exactly one store acquisition
- No I/O happens inside the acquisition; logging is done after release
- Every write is checked with verify_rotation_invariants before release

Result Contract:
- Expected failures are returned as ServiceResult (DUPLICATE, NOT_FOUND,
  INVALID); nothing is raised for them
- InvariantViolationError is raised only when the engine itself is wrong
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import timedelta
from uuid import UUID

import structlog

from src.application.dtos.rotation import (
    TaskView,
    UserView,
    build_task_view,
    build_user_view,
)
from src.application.ports.random_source import RandomSourceProtocol
from src.application.ports.rotation_store import RotationStoreProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.domain.models.rotation_event import RotationEvent
from src.domain.models.rotation_task import RotationTask, TaskSnapshot
from src.domain.models.service_result import ErrorKind, ServiceResult
from src.domain.models.user import User
from src.domain.services.rotation_invariants import verify_rotation_invariants
from src.domain.services.task_rotation_policy import finalize, try_assign

# Tasks younger than this cannot complete (one default sweep interval)
DEFAULT_MIN_RETENTION = timedelta(minutes=2)


@dataclass(frozen=True)
class _BackfillOutcome:
    assigned: int
    completed: int


class TaskRotationService:
    """Assignment engine for users and tasks.

    Attributes:
        min_retention: Minimum task age before completion (zero disables).

    Example:
        >>> service = TaskRotationService(store, SecureRandomSource(), SystemTimeAuthority())
        >>> result = await service.register_user("Alice")
        >>> events = await service.rotate()
    """

    def __init__(
        self,
        store: RotationStoreProtocol,
        random_source: RandomSourceProtocol,
        time_authority: TimeAuthorityProtocol,
        min_retention: timedelta = DEFAULT_MIN_RETENTION,
    ) -> None:
        """Initialize the service.

        Args:
            store: The single store instance for this process.
            random_source: Source of unbiased selection indices.
            time_authority: Clock for creation times and the retention guard.
            min_retention: Minimum task age before it may complete. Zero
                disables the guard.
        """
        self._store = store
        self._random = random_source
        self._time = time_authority
        self._min_retention = min_retention
        self._log = structlog.get_logger().bind(service="task_rotation_service")

    @property
    def min_retention(self) -> timedelta:
        """Get the completion guard."""
        return self._min_retention

    # =========================================================================
    # Users
    # =========================================================================

    async def list_users(self) -> list[UserView]:
        """List all users with their assignment statistics."""

        def read(users: Sequence[User], tasks: Sequence[TaskSnapshot]) -> list[UserView]:
            return [build_user_view(user, tasks) for user in users]

        return await self._store.read_snapshot(read)

    async def get_user(self, user_id: UUID) -> ServiceResult[UserView]:
        """Get a single user.

        Args:
            user_id: User to look up.

        Returns:
            The user view, or NOT_FOUND.
        """

        def read(
            users: Sequence[User], tasks: Sequence[TaskSnapshot]
        ) -> ServiceResult[UserView]:
            user = next((u for u in users if u.id == user_id), None)
            if user is None:
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "User not found.")
            return ServiceResult.ok(build_user_view(user, tasks))

        return await self._store.read_snapshot(read)

    async def register_user(self, name: str) -> ServiceResult[UserView]:
        """Register a user and hand waiting tasks to them where possible.

        Args:
            name: Display name. Surrounding whitespace is removed.

        Returns:
            The new user's view, INVALID for a blank name, or DUPLICATE if
            another user has the same name ignoring case.
        """
        trimmed = (name or "").strip()
        if not trimmed:
            return ServiceResult.failure(ErrorKind.INVALID, "Name is required.")

        def write(
            users: list[User], tasks: list[RotationTask]
        ) -> tuple[ServiceResult[UserView], _BackfillOutcome | None]:
            if any(u.has_name(trimmed) for u in users):
                return (
                    ServiceResult.failure(
                        ErrorKind.DUPLICATE,
                        "A user with the same name already exists.",
                    ),
                    None,
                )

            user = User.create(trimmed)
            users.append(user)
            outcome = self._backfill(users, tasks)
            verify_rotation_invariants(users, tasks)
            return ServiceResult.ok(build_user_view(user, tasks)), outcome

        result, outcome = await self._store.write(write)
        if result.success and result.value is not None and outcome is not None:
            self._log.info(
                "user_registered",
                user_id=str(result.value.id),
                tasks_assigned=outcome.assigned,
                tasks_completed=outcome.completed,
            )
        return result

    async def remove_user(self, user_id: UUID) -> ServiceResult[None]:
        """Remove a user, release their tasks and backfill.

        Tasks held by the user go back to WAITING. Any task that had the user
        as its previous holder loses that back-reference, so the cool-down no
        longer applies.

        Args:
            user_id: User to remove.

        Returns:
            Success, or NOT_FOUND.
        """

        def write(
            users: list[User], tasks: list[RotationTask]
        ) -> tuple[ServiceResult[None], int, _BackfillOutcome | None]:
            user = next((u for u in users if u.id == user_id), None)
            if user is None:
                return (
                    ServiceResult.failure(ErrorKind.NOT_FOUND, "User not found."),
                    0,
                    None,
                )

            users.remove(user)

            released = 0
            for task in tasks:
                if task.is_completed:
                    continue
                if task.assigned_user_id == user_id:
                    task.unassign()
                    released += 1
                if task.previous_user_id == user_id:
                    task.previous_user_id = None

            outcome = self._backfill(users, tasks)
            verify_rotation_invariants(users, tasks)
            return ServiceResult.ok(), released, outcome

        result, released, outcome = await self._store.write(write)
        if result.success and outcome is not None:
            self._log.info(
                "user_removed",
                user_id=str(user_id),
                tasks_released=released,
                tasks_reassigned=outcome.assigned,
                tasks_completed=outcome.completed,
            )
        return result

    # =========================================================================
    # Tasks
    # =========================================================================

    async def list_tasks(self) -> list[TaskView]:
        """List all tasks, completed ones included, in creation order."""

        def read(users: Sequence[User], tasks: Sequence[TaskSnapshot]) -> list[TaskView]:
            return [build_task_view(task, users) for task in tasks]

        return await self._store.read_snapshot(read)

    async def get_task(self, task_id: UUID) -> ServiceResult[TaskView]:
        """Get a single task.

        Args:
            task_id: Task to look up.

        Returns:
            The task view, or NOT_FOUND.
        """

        def read(
            users: Sequence[User], tasks: Sequence[TaskSnapshot]
        ) -> ServiceResult[TaskView]:
            task = next((t for t in tasks if t.id == task_id), None)
            if task is None:
                return ServiceResult.failure(ErrorKind.NOT_FOUND, "Task not found.")
            return ServiceResult.ok(build_task_view(task, users))

        return await self._store.read_snapshot(read)

    async def create_task(self, title: str) -> ServiceResult[TaskView]:
        """Create a task and try to assign it straight away.

        Args:
            title: Task title. Surrounding whitespace is removed.

        Returns:
            The new task's view, INVALID for a blank title, or DUPLICATE if
            any stored task has the same title ignoring case.
        """
        trimmed = (title or "").strip()
        if not trimmed:
            return ServiceResult.failure(ErrorKind.INVALID, "Title is required.")

        def write(
            users: list[User], tasks: list[RotationTask]
        ) -> ServiceResult[TaskView]:
            if any(t.has_title(trimmed) for t in tasks):
                return ServiceResult.failure(
                    ErrorKind.DUPLICATE,
                    "A task with the same title already exists.",
                )

            now = self._time.utcnow()
            task = RotationTask.create(trimmed, created_at=now)
            tasks.append(task)
            try_assign(task, users, tasks, pick_index=self._random.pick_index)
            self._finalize(task, users)
            verify_rotation_invariants(users, tasks)
            return ServiceResult.ok(build_task_view(task, users))

        result = await self._store.write(write)
        if result.success and result.value is not None:
            self._log.info(
                "task_created",
                task_id=str(result.value.id),
                state=result.value.state.value,
                assigned_user_id=(
                    str(result.value.assigned_user_id)
                    if result.value.assigned_user_id
                    else None
                ),
            )
        return result

    # =========================================================================
    # Rotation
    # =========================================================================

    async def rotate(self) -> list[RotationEvent]:
        """Run one rotation sweep over every open task.

        With an empty roster every open task is released and its cool-down
        cleared. Otherwise each open task, in store order, is offered to a
        new holder other than its current and previous ones. A task that
        cannot move is released and keeps its last holder as previous, so
        that user sits out the next attempt.

        Returns:
            Holder changes in the order they happened. Informational only.
        """

        def write(users: list[User], tasks: list[RotationTask]) -> list[RotationEvent]:
            events: list[RotationEvent] = []

            if not users:
                for task in tasks:
                    if task.is_completed:
                        continue
                    if task.assigned_user_id is not None:
                        events.append(RotationEvent(task.id, task.assigned_user_id, None))
                    task.release()
                verify_rotation_invariants(users, tasks)
                return events

            for task in tasks:
                if task.is_completed:
                    continue

                previous = task.assigned_user_id
                assigned = try_assign(
                    task,
                    users,
                    tasks,
                    pick_index=self._random.pick_index,
                    force_different=True,
                )
                if not assigned:
                    if previous is not None:
                        events.append(RotationEvent(task.id, previous, None))
                    task.release(keep_previous=previous)
                elif task.assigned_user_id != previous:
                    events.append(RotationEvent(task.id, previous, task.assigned_user_id))

                self._finalize(task, users)

            verify_rotation_invariants(users, tasks)
            return events

        events = await self._store.write(write)
        self._log.debug("rotation_sweep_applied", event_count=len(events))
        return events

    # =========================================================================
    # Seeding
    # =========================================================================

    async def seed_demo_data(self) -> bool:
        """Populate an empty store with demo users and tasks.

        Seeding is a no-op when the store already holds any user or task,
        so calling it repeatedly never creates duplicates.

        Returns:
            True if data was added.
        """

        def write(
            users: list[User], tasks: list[RotationTask]
        ) -> _BackfillOutcome | None:
            if users or tasks:
                return None
            now = self._time.utcnow()
            users.extend(User.create(name) for name in DEMO_USER_NAMES)
            tasks.extend(RotationTask.create(title, created_at=now) for title in DEMO_TASK_TITLES)
            outcome = self._backfill(users, tasks)
            verify_rotation_invariants(users, tasks)
            return outcome

        outcome = await self._store.write(write)
        if outcome is None:
            self._log.info("demo_seed_skipped", reason="store_not_empty")
            return False
        self._log.info(
            "demo_data_seeded",
            users=len(DEMO_USER_NAMES),
            tasks=len(DEMO_TASK_TITLES),
            tasks_assigned=outcome.assigned,
        )
        return True

    # =========================================================================
    # Internals (call only inside a store write)
    # =========================================================================

    def _backfill(self, users: list[User], tasks: list[RotationTask]) -> _BackfillOutcome:
        assigned = 0
        completed = 0
        waiting = [t for t in tasks if not t.is_completed and t.assigned_user_id is None]
        for task in waiting:
            if try_assign(task, users, tasks, pick_index=self._random.pick_index):
                assigned += 1
            if self._finalize(task, users):
                completed += 1
        return _BackfillOutcome(assigned=assigned, completed=completed)

    def _finalize(self, task: RotationTask, users: list[User]) -> bool:
        return finalize(
            task,
            users,
            now=self._time.utcnow(),
            min_retention=self._min_retention,
        )


DEMO_USER_NAMES: tuple[str, ...] = (
    "Liam",
    "Noah",
    "Oliver",
    "Theodore",
    "James",
    "Henry",
    "Mateo",
    "Elijah",
    "Lucas",
    "William",
)

DEMO_TASK_TITLES: tuple[str, ...] = (
    "Ride",
    "Sit down",
    "Win",
    "Drink",
    "Knit",
    "Stand",
    "Throw",
    "Close",
    "Open",
    "Skip",
    "Sleep",
    "Cut",
    "Eat",
    "Cook",
    "Sip",
    "Fight",
    "Play",
    "Give",
    "Dig",
    "Bath",
)
