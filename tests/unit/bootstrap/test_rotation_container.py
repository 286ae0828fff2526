"""Unit tests for the rotation container built from the default configuration.

The container is what the API runs on, so the walkthrough scenarios are
checked here against RotationConfig() rather than a hand-wired engine.
"""

from datetime import timedelta

import pytest

from src.bootstrap.rotation import RotationContainer, build_rotation_container
from src.config.rotation_config import DEFAULT_ROTATION_INTERVAL_SECONDS, RotationConfig
from src.domain.models.rotation_event import RotationEvent
from src.domain.models.rotation_task import TaskState
from src.domain.services.task_rotation_policy import MAX_ACTIVE_TASKS_PER_USER
from src.infrastructure.stubs.sequence_random_source import SequenceRandomSource
from tests.helpers.fake_time_authority import FakeTimeAuthority


@pytest.fixture
def clock() -> FakeTimeAuthority:
    """Provide a frozen clock."""
    return FakeTimeAuthority()


@pytest.fixture
def container(clock: FakeTimeAuthority) -> RotationContainer:
    """Provide a container built from the default configuration."""
    return build_rotation_container(
        RotationConfig(),
        random_source=SequenceRandomSource(),
        time_authority=clock,
    )


class TestBuildRotationContainer:
    """Tests for build_rotation_container wiring."""

    def test_guard_matches_interval(self, container: RotationContainer) -> None:
        """Test the engine's completion guard is one sweep interval."""
        assert container.service.min_retention == timedelta(
            seconds=DEFAULT_ROTATION_INTERVAL_SECONDS
        )
        assert container.scheduler.interval_seconds == DEFAULT_ROTATION_INTERVAL_SECONDS

    def test_explicit_zero_guard(self, clock: FakeTimeAuthority) -> None:
        """Test a zero guard reaches the engine unchanged."""
        container = build_rotation_container(
            RotationConfig(min_retention_seconds=0),
            random_source=SequenceRandomSource(),
            time_authority=clock,
        )
        assert container.service.min_retention == timedelta(0)


class TestDefaultConfigScenarios:
    """Walkthroughs under the default configuration."""

    @pytest.mark.asyncio
    async def test_single_user_single_task(self, container: RotationContainer) -> None:
        """Test the lone user holds the task, then a sweep releases it."""
        service = container.service
        u1 = (await service.register_user("U1")).value
        assert u1 is not None

        created = (await service.create_task("T")).value

        assert created is not None
        assert created.state == TaskState.IN_PROGRESS
        assert created.assigned_user_id == u1.id

        events = await service.rotate()

        assert events == [RotationEvent(created.id, u1.id, None)]
        task = (await service.get_task(created.id)).value
        assert task is not None
        assert task.state == TaskState.WAITING
        assert task.assigned_user_id is None
        assert task.previous_user_id == u1.id

    @pytest.mark.asyncio
    async def test_capacity_backfill(self, container: RotationContainer) -> None:
        """Test the fourth task waits for a second user."""
        service = container.service
        u1 = (await service.register_user("U1")).value
        assert u1 is not None

        views = [(await service.create_task(f"T{i}")).value for i in range(4)]

        assert all(view is not None for view in views)
        states = [view.state for view in views if view is not None]
        assert states == [TaskState.IN_PROGRESS] * MAX_ACTIVE_TASKS_PER_USER + [
            TaskState.WAITING
        ]
        fourth = views[3]
        assert fourth is not None

        u2 = (await service.register_user("U2")).value

        assert u2 is not None
        task = (await service.get_task(fourth.id)).value
        assert task is not None
        assert task.state == TaskState.IN_PROGRESS
        assert task.assigned_user_id == u2.id

    @pytest.mark.asyncio
    async def test_task_completes_once_guard_elapses(
        self, container: RotationContainer, clock: FakeTimeAuthority
    ) -> None:
        """Test the lone user's task completes after one interval has passed."""
        service = container.service
        u1 = (await service.register_user("U1")).value
        assert u1 is not None
        created = (await service.create_task("T")).value
        assert created is not None

        clock.advance(seconds=DEFAULT_ROTATION_INTERVAL_SECONDS)
        await service.rotate()

        task = (await service.get_task(created.id)).value
        assert task is not None
        assert task.state == TaskState.COMPLETED
        assert task.assigned_user_id is None
        assert task.assignment_history == (u1.id,)
