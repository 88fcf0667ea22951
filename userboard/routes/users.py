"""
UserBoard Backend — Users Route Handlers
==========================================

What:  GET /api/users (list), POST /api/users (create), DELETE /api/users/{id}.
How:   Request bodies are parsed into UserCreate, handlers delegate to
       UserService, responses are serialized through UserResponse.
Who:   Called by the browser client in static/app.js.

Client errors use FastAPI defaults: malformed JSON and non-integer ids
return 422, unknown paths 404.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from userboard.dependencies import get_user_service
from userboard.schemas.user import ErrorResponse, UserCreate, UserResponse
from userboard.services.user_service import UserService

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api", tags=["Users"])


@router.get(
    "/users",
    response_model=List[UserResponse],
    responses={
        500: {"description": "Storage error", "model": ErrorResponse},
    },
    summary="List all users",
)
async def list_users(
    service: UserService = Depends(get_user_service),
) -> List[UserResponse]:
    """Returns every stored user; an empty collection yields `[]`."""
    return await service.list_users()


@router.post(
    "/users",
    response_model=UserResponse,
    responses={
        500: {"description": "Storage error", "model": ErrorResponse},
    },
    summary="Create a user",
    description=(
        "Stores a new user and returns it with its assigned id. "
        "name and email are free text and are not validated."
    ),
)
async def create_user(
    payload: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    return await service.create_user(payload)


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={
        200: {"description": "User deleted (or was already absent)"},
        500: {"description": "Storage error", "model": ErrorResponse},
    },
    summary="Delete a user by id",
)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    """
    Delete a user.

    Deleting an id that does not exist succeeds with the same empty
    200 response as deleting one that does.
    """
    await service.delete_user(user_id)
    return Response(status_code=status.HTTP_200_OK)
