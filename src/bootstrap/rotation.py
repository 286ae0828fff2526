"""Bootstrap wiring for the task rotation engine.

build_rotation_container constructs the one store, engine and scheduler a
process uses. The API lifespan builds it once and hands it to request
handlers through app.state; nothing else creates a store.
"""

from __future__ import annotations

from dataclasses import dataclass

from structlog import get_logger

from src.application.ports.random_source import RandomSourceProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.services.rotation_scheduler import RotationScheduler
from src.application.services.task_rotation_service import TaskRotationService
from src.config.rotation_config import RotationConfig
from src.infrastructure.adapters.in_memory_rotation_store import InMemoryRotationStore
from src.infrastructure.adapters.secure_random_source import SecureRandomSource
from src.infrastructure.adapters.system_time_authority import SystemTimeAuthority

logger = get_logger()


@dataclass(frozen=True)
class RotationContainer:
    """The process-wide rotation components.

    Attributes:
        config: Configuration the components were built from.
        store: The single store instance.
        service: Engine bound to the store.
        scheduler: Background driver bound to the engine.
    """

    config: RotationConfig
    store: InMemoryRotationStore
    service: TaskRotationService
    scheduler: RotationScheduler


def build_rotation_container(
    config: RotationConfig | None = None,
    *,
    random_source: RandomSourceProtocol | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
) -> RotationContainer:
    """Construct the rotation components.

    Args:
        config: Configuration; read from the environment when omitted.
        random_source: Override for the production SecureRandomSource.
        time_authority: Override for the production SystemTimeAuthority.

    Returns:
        A RotationContainer sharing one store.
    """
    config = config or RotationConfig.from_environment()
    clock = time_authority or SystemTimeAuthority()

    store = InMemoryRotationStore()
    service = TaskRotationService(
        store=store,
        random_source=random_source or SecureRandomSource(),
        time_authority=clock,
        min_retention=config.min_retention_timedelta,
    )
    scheduler = RotationScheduler(
        rotation_service=service,
        time_authority=clock,
        interval_seconds=config.interval_seconds,
    )

    logger.info(
        "rotation_container_built",
        interval_seconds=config.interval_seconds,
        min_retention_seconds=config.min_retention_seconds,
        scheduler_enabled=config.scheduler_enabled,
        seed_on_startup=config.seed_on_startup,
    )
    return RotationContainer(
        config=config,
        store=store,
        service=service,
        scheduler=scheduler,
    )


__all__ = ["RotationContainer", "build_rotation_container"]
