"""Unit tests for RotationScheduler.

Tests the background loop that drives the rotation sweep.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.application.services.rotation_scheduler import RotationScheduler
from src.application.services.task_rotation_service import TaskRotationService
from src.config.rotation_config import DEFAULT_ROTATION_INTERVAL_SECONDS
from src.domain.models.rotation_event import RotationEvent
from tests.helpers.fake_time_authority import FakeTimeAuthority


def _scheduler(
    rotate: AsyncMock,
    interval_seconds: int = DEFAULT_ROTATION_INTERVAL_SECONDS,
) -> RotationScheduler:
    service = MagicMock(spec=TaskRotationService)
    service.rotate = rotate
    return RotationScheduler(
        rotation_service=service,
        time_authority=FakeTimeAuthority(),
        interval_seconds=interval_seconds,
    )


class TestRotationSchedulerAttributes:
    """Tests for RotationScheduler attributes."""

    def test_default_interval(self) -> None:
        """Test default interval is 120 seconds."""
        scheduler = _scheduler(AsyncMock(return_value=[]))
        assert scheduler.interval_seconds == 120

    def test_custom_interval(self) -> None:
        """Test a custom interval is kept."""
        scheduler = _scheduler(AsyncMock(return_value=[]), interval_seconds=30)
        assert scheduler.interval_seconds == 30

    def test_running_is_false_initially(self) -> None:
        """Test running is False initially."""
        assert not _scheduler(AsyncMock(return_value=[])).running


class TestRotationSchedulerStartStop:
    """Tests for start and stop methods."""

    @pytest.mark.asyncio
    async def test_start_sweeps_immediately(self) -> None:
        """Test the first sweep does not wait for the interval."""
        rotate = AsyncMock(return_value=[])
        scheduler = _scheduler(rotate)

        await scheduler.start()
        await asyncio.sleep(0.01)

        assert scheduler.running
        rotate.assert_awaited_once()
        await scheduler.stop()

    @pytest.mark.asyncio
    async def test_repeats_on_interval(self) -> None:
        """Test sweeps keep firing while running."""
        rotate = AsyncMock(return_value=[])
        scheduler = _scheduler(rotate)
        scheduler._interval = 0.01  # 10ms for testing

        await scheduler.start()
        await asyncio.sleep(0.05)
        await scheduler.stop()

        assert rotate.await_count >= 2

    @pytest.mark.asyncio
    async def test_stop_cancels_task(self) -> None:
        """Test stop cancels and clears the background task."""
        scheduler = _scheduler(AsyncMock(return_value=[]))

        await scheduler.start()
        await asyncio.sleep(0.01)
        await scheduler.stop()

        assert not scheduler.running
        assert scheduler._task is None

    @pytest.mark.asyncio
    async def test_start_is_idempotent(self) -> None:
        """Test calling start twice creates one loop."""
        rotate = AsyncMock(return_value=[])
        scheduler = _scheduler(rotate)

        await scheduler.start()
        first_task = scheduler._task
        await scheduler.start()
        await asyncio.sleep(0.01)

        assert scheduler._task is first_task
        rotate.assert_awaited_once()
        await scheduler.stop()

    @pytest.mark.asyncio
    async def test_stop_when_not_running(self) -> None:
        """Test stop before start is safe."""
        scheduler = _scheduler(AsyncMock(return_value=[]))
        await scheduler.stop()
        assert not scheduler.running


class TestRotationSchedulerErrorHandling:
    """Tests for failure handling inside the loop."""

    @pytest.mark.asyncio
    async def test_failed_sweep_does_not_stop_loop(self) -> None:
        """Test the loop continues after a sweep raises."""
        rotate = AsyncMock(side_effect=[RuntimeError("boom"), [], []])
        scheduler = _scheduler(rotate)
        scheduler._interval = 0.01

        await scheduler.start()
        await asyncio.sleep(0.05)

        assert scheduler.running
        assert rotate.await_count >= 2
        await scheduler.stop()


class TestRotationSchedulerRunOnce:
    """Tests for run_once."""

    @pytest.mark.asyncio
    async def test_run_once_returns_events(self) -> None:
        """Test run_once passes the sweep's events through."""
        events = [
            RotationEvent(uuid4(), uuid4(), uuid4()),
            RotationEvent(uuid4(), uuid4(), None),
        ]
        rotate = AsyncMock(return_value=events)
        scheduler = _scheduler(rotate)

        assert await scheduler.run_once() == events
        rotate.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_run_once_propagates_errors(self) -> None:
        """Test run_once leaves error handling to the loop."""
        scheduler = _scheduler(AsyncMock(side_effect=RuntimeError("boom")))
        with pytest.raises(RuntimeError):
            await scheduler.run_once()
