"""Task rotation API dependencies.

The application lifespan builds one RotationContainer and stores it on
app.state.rotation. These providers hand its parts to route handlers, so
every request in a process shares the same store.

Tests can either set app.state.rotation directly or use
app.dependency_overrides on get_rotation_service.
"""

from fastapi import HTTPException, Request

from src.application.services.rotation_scheduler import RotationScheduler
from src.application.services.task_rotation_service import TaskRotationService
from src.bootstrap.rotation import RotationContainer

STATE_ATTRIBUTE = "rotation"


def set_rotation_container(app_state: object, container: RotationContainer) -> None:
    """Attach the container to an application's state.

    Args:
        app_state: The FastAPI app.state object.
        container: Container built by build_rotation_container.
    """
    setattr(app_state, STATE_ATTRIBUTE, container)


def get_rotation_container(request: Request) -> RotationContainer:
    """Get the container for the current application.

    Raises:
        HTTPException: 503 if the application has not finished starting.
    """
    container = getattr(request.app.state, STATE_ATTRIBUTE, None)
    if container is None:
        raise HTTPException(
            status_code=503,
            detail={
                "type": "urn:task-rotation:error:not-ready",
                "title": "Service Unavailable",
                "status": 503,
                "detail": "Task rotation is not initialised.",
                "instance": str(request.url),
            },
        )
    return container


def get_rotation_service(request: Request) -> TaskRotationService:
    """Get the engine for the current application."""
    return get_rotation_container(request).service


def get_rotation_scheduler(request: Request) -> RotationScheduler | None:
    """Get the scheduler, or None before startup."""
    container = getattr(request.app.state, STATE_ATTRIBUTE, None)
    return container.scheduler if container is not None else None
