"""Demo data endpoint."""

from fastapi import APIRouter, Depends

from src.api.dependencies.rotation import get_rotation_service
from src.api.models.rotation import SeedResponse
from src.application.services.task_rotation_service import TaskRotationService

router = APIRouter(prefix="/api", tags=["seed"])


@router.post("/seedTestData", response_model=SeedResponse)
async def seed_test_data(
    service: TaskRotationService = Depends(get_rotation_service),
) -> SeedResponse:
    """Add demo users and tasks if the store is empty.

    Repeated calls are harmless; only the first one on an empty store adds
    anything.
    """
    return SeedResponse(seeded=await service.seed_demo_data())
