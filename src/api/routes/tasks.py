"""Task endpoints.

Tasks are never edited or deleted through the API; their holders change
only through the engine (creation, backfill and the rotation sweep).
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response

from src.api.adapters.service_result import unwrap
from src.api.dependencies.rotation import get_rotation_service
from src.api.models.rotation import (
    CreateTaskRequest,
    RotationErrorResponse,
    TaskResponse,
)
from src.application.services.task_rotation_service import TaskRotationService

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    service: TaskRotationService = Depends(get_rotation_service),
) -> list[TaskResponse]:
    """List all tasks, completed ones included."""
    return [TaskResponse.from_view(view) for view in await service.list_tasks()]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    responses={404: {"model": RotationErrorResponse, "description": "Unknown task"}},
)
async def get_task(
    task_id: UUID,
    request: Request,
    service: TaskRotationService = Depends(get_rotation_service),
) -> TaskResponse:
    """Get one task."""
    view = unwrap(await service.get_task(task_id), request)
    return TaskResponse.from_view(view)


@router.post(
    "",
    response_model=TaskResponse,
    status_code=201,
    responses={
        400: {"model": RotationErrorResponse, "description": "Blank title"},
        409: {"model": RotationErrorResponse, "description": "Title already taken"},
    },
    summary="Create a task",
)
async def create_task(
    request_data: CreateTaskRequest,
    request: Request,
    response: Response,
    service: TaskRotationService = Depends(get_rotation_service),
) -> TaskResponse:
    """Create a task and assign it immediately when someone is free.

    Returns 201 with a Location header pointing at the new task.
    """
    view = unwrap(await service.create_task(request_data.title), request)
    response.headers["Location"] = str(request.url_for("get_task", task_id=view.id))
    return TaskResponse.from_view(view)
