"""
Users API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, status

from . import schemas, service
from .dependencies import get_user_repository
from .models import MAX_USER_ID
from .repository import UserRepository

router = APIRouter()


@router.get("/users")
async def list_users(
    repository: UserRepository = Depends(get_user_repository),
) -> list[schemas.UserResponse]:
    return await service.list_users(repository)


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: schemas.UserPayload,
    repository: UserRepository = Depends(get_user_repository),
) -> schemas.UserResponse:
    return await service.create_user(repository, payload)


@router.get("/users/{user_id}")
async def get_user(
    user_id: int = Path(..., ge=1, le=MAX_USER_ID),
    repository: UserRepository = Depends(get_user_repository),
) -> schemas.UserResponse:
    return await service.get_user(repository, user_id)


@router.put("/users/{user_id}")
async def update_user(
    payload: schemas.UserPayload,
    user_id: int = Path(..., ge=1, le=MAX_USER_ID),
    repository: UserRepository = Depends(get_user_repository),
) -> schemas.UserResponse:
    return await service.update_user(repository, user_id, payload)


@router.delete("/users/{user_id}")
async def delete_user(
    user_id: int = Path(..., ge=1, le=MAX_USER_ID),
    repository: UserRepository = Depends(get_user_repository),
) -> schemas.DeleteResponse:
    """
    Hard-delete a user. Unknown ids return 404.
    """
    return await service.delete_user(repository, user_id)
