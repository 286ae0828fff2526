"""Startup and shutdown hooks for the task rotation API.

On startup:
1. Seed demo data when TASK_ROTATION_SEED_ON_STARTUP is set
2. Start the rotation scheduler when TASK_ROTATION_ENABLED is set; it
   sweeps once immediately

On shutdown the scheduler is stopped and awaited.

Usage in FastAPI:
    @asynccontextmanager
    async def lifespan(app):
        container = build_rotation_container()
        await start_rotation(container)
        yield
        await stop_rotation(container)
"""

from structlog import get_logger

from src.bootstrap.rotation import RotationContainer

logger = get_logger()


async def start_rotation(container: RotationContainer) -> None:
    """Run the startup steps for a container.

    Args:
        container: The process-wide rotation components.
    """
    if container.config.seed_on_startup:
        seeded = await container.service.seed_demo_data()
        logger.info("startup_seed_finished", seeded=seeded)

    if container.config.scheduler_enabled:
        await container.scheduler.start()
    else:
        logger.info("rotation_scheduler_disabled")


async def stop_rotation(container: RotationContainer) -> None:
    """Stop the background scheduler.

    Args:
        container: The process-wide rotation components.
    """
    await container.scheduler.stop()
    logger.info("rotation_shutdown_complete")
