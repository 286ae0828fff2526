"""Health check endpoint for the task rotation API."""

from fastapi import APIRouter, Depends

from src.api.dependencies.rotation import get_rotation_scheduler
from src.api.models.health import HealthResponse
from src.application.services.rotation_scheduler import RotationScheduler

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    scheduler: RotationScheduler | None = Depends(get_rotation_scheduler),
) -> HealthResponse:
    """Return health status and whether the rotation loop is running.

    Returns:
        Health status with 200 OK.
    """
    return HealthResponse(
        status="healthy",
        rotation_scheduler_running=scheduler.running if scheduler else False,
    )
