"""Rotation scheduler background service.

This service runs a background loop that periodically asks the
TaskRotationService to sweep every open task to a new holder.

Loop Contract:
- One sweep runs immediately on start, so waiting tasks are not delayed
  by the first interval
- Sweeps never overlap; the next one starts only after the previous one
  has finished and the remainder of the interval has elapsed
- A failing sweep is logged and the loop keeps going
- stop() cancels the loop; the lock is never held across an await, so
  cancellation cannot strand it

Note:
    This service should be started with the application lifecycle
    and stopped when the application shuts down.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Optional

import structlog

from src.config.rotation_config import DEFAULT_ROTATION_INTERVAL_SECONDS

if TYPE_CHECKING:
    from src.application.ports.time_authority import TimeAuthorityProtocol
    from src.application.services.task_rotation_service import TaskRotationService
    from src.domain.models.rotation_event import RotationEvent


class RotationScheduler:
    """Periodic driver for TaskRotationService.rotate().

    Holds no domain logic: it calls rotate() and logs what came back.

    Attributes:
        running: Whether the scheduler is currently running.
        interval_seconds: The sweep interval in seconds.

    Example:
        >>> scheduler = RotationScheduler(rotation_service=service, time_authority=clock)
        >>> await scheduler.start()
        >>> # ... application runs ...
        >>> await scheduler.stop()
    """

    def __init__(
        self,
        rotation_service: "TaskRotationService",
        time_authority: "TimeAuthorityProtocol",
        interval_seconds: int = DEFAULT_ROTATION_INTERVAL_SECONDS,
    ) -> None:
        """Initialize the rotation scheduler.

        Args:
            rotation_service: The engine whose sweep is driven.
            time_authority: Clock used to measure sweep duration.
            interval_seconds: The sweep interval in seconds, already
                normalised by RotationConfig.
        """
        self._rotation = rotation_service
        self._time = time_authority
        self._interval = interval_seconds
        self._running: bool = False
        self._task: Optional[asyncio.Task[None]] = None
        self._log = structlog.get_logger().bind(service="rotation_scheduler")

    @property
    def running(self) -> bool:
        """Check if the scheduler is running."""
        return self._running

    @property
    def interval_seconds(self) -> int:
        """Get the sweep interval in seconds."""
        return self._interval

    async def start(self) -> None:
        """Start the rotation loop.

        Note:
            Calling start multiple times is safe (idempotent).
        """
        if self._running:
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        self._log.info("rotation_scheduler_started", interval=self._interval)

    async def stop(self) -> None:
        """Stop the rotation loop and wait for it to finish.

        Note:
            Calling stop when not running is safe.
        """
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        self._log.info("rotation_scheduler_stopped")

    async def _run_loop(self) -> None:
        """Internal rotation loop."""
        while self._running:
            try:
                started = self._time.monotonic()
                events = await self.run_once()
                elapsed = self._time.monotonic() - started
                self._log.info(
                    "rotation_sweep_completed",
                    changes=len(events),
                    elapsed_seconds=elapsed,
                )

                # Sleep for remainder of interval
                await asyncio.sleep(max(0, self._interval - elapsed))

            except asyncio.CancelledError:
                raise
            except Exception as e:
                self._log.error("rotation_sweep_failed", error=str(e))
                await asyncio.sleep(self._interval)

    async def run_once(self) -> "list[RotationEvent]":
        """Run a single sweep and log each holder change.

        Returns:
            The events produced by the sweep.

        Note:
            start() and stop() drive this in production; tests call it
            directly.
        """
        events = await self._rotation.rotate()
        for event in events:
            if event.is_release:
                self._log.info(
                    "task_released",
                    task_id=str(event.task_id),
                    from_user_id=str(event.from_user_id),
                )
            else:
                self._log.info(
                    "task_reassigned",
                    task_id=str(event.task_id),
                    from_user_id=(
                        str(event.from_user_id) if event.from_user_id else None
                    ),
                    to_user_id=str(event.to_user_id),
                )
        return events
