"""User endpoints.

Registering or removing a user triggers a backfill pass in the engine, so
the response of either call already reflects any tasks that moved.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response

from src.api.adapters.service_result import unwrap
from src.api.dependencies.rotation import get_rotation_service
from src.api.models.rotation import (
    CreateUserRequest,
    RotationErrorResponse,
    UserResponse,
)
from src.application.services.task_rotation_service import TaskRotationService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    service: TaskRotationService = Depends(get_rotation_service),
) -> list[UserResponse]:
    """List all users with their task counts."""
    return [UserResponse.from_view(view) for view in await service.list_users()]


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={404: {"model": RotationErrorResponse, "description": "Unknown user"}},
)
async def get_user(
    user_id: UUID,
    request: Request,
    service: TaskRotationService = Depends(get_rotation_service),
) -> UserResponse:
    """Get one user."""
    view = unwrap(await service.get_user(user_id), request)
    return UserResponse.from_view(view)


@router.post(
    "",
    response_model=UserResponse,
    status_code=201,
    responses={
        400: {"model": RotationErrorResponse, "description": "Blank name"},
        409: {"model": RotationErrorResponse, "description": "Name already taken"},
    },
    summary="Register a user",
)
async def create_user(
    request_data: CreateUserRequest,
    request: Request,
    response: Response,
    service: TaskRotationService = Depends(get_rotation_service),
) -> UserResponse:
    """Register a user and hand waiting tasks to them.

    Returns 201 with a Location header pointing at the new user.
    """
    view = unwrap(await service.register_user(request_data.name), request)
    response.headers["Location"] = str(request.url_for("get_user", user_id=view.id))
    return UserResponse.from_view(view)


@router.delete(
    "/{user_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"model": RotationErrorResponse, "description": "Unknown user"}},
    summary="Remove a user",
)
async def delete_user(
    user_id: UUID,
    request: Request,
    service: TaskRotationService = Depends(get_rotation_service),
) -> Response:
    """Remove a user, release their tasks and reassign them where possible."""
    unwrap(await service.remove_user(user_id), request)
    return Response(status_code=204)
