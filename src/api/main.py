"""FastAPI application entry point for the task rotation service."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src import __version__
from src.api.dependencies.rotation import set_rotation_container
from src.api.middleware.logging_middleware import LoggingMiddleware
from src.api.routes.health import router as health_router
from src.api.routes.seed import router as seed_router
from src.api.routes.tasks import router as tasks_router
from src.api.routes.users import router as users_router
from src.api.startup import start_rotation, stop_rotation
from src.bootstrap.logging import configure_logging
from src.bootstrap.rotation import RotationContainer, build_rotation_container


def create_app(
    container: RotationContainer | None = None,
    *,
    configure_logs: bool = True,
) -> FastAPI:
    """Create the application.

    Args:
        container: Prebuilt rotation components. Built from the environment
            at startup when omitted.
        configure_logs: Whether startup configures structlog.

    Returns:
        The FastAPI application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if configure_logs:
            configure_logging()
        active = container or build_rotation_container()
        set_rotation_container(app.state, active)
        await start_rotation(active)
        try:
            yield
        finally:
            await stop_rotation(active)

    app = FastAPI(
        title="Task Rotation API",
        description="Fair rotation of tasks across a changing pool of users",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(LoggingMiddleware)
    app.include_router(health_router)
    app.include_router(users_router)
    app.include_router(tasks_router)
    app.include_router(seed_router)
    return app


app = create_app()
