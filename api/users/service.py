"""
Users business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import schemas
from .models import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


def _to_user_response(user: User) -> schemas.UserResponse:
    return schemas.UserResponse(id=user.id, name=user.name, email=user.email)


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="User not found.",
    )


async def list_users(repository: UserRepository) -> list[schemas.UserResponse]:
    users = await repository.list_all()
    return [_to_user_response(u) for u in users]


async def create_user(
    repository: UserRepository,
    payload: schemas.UserPayload,
) -> schemas.UserResponse:
    user = await repository.create(name=payload.name, email=payload.email)
    logger.info("Created user id=%s", user.id)
    return _to_user_response(user)


async def get_user(repository: UserRepository, user_id: int) -> schemas.UserResponse:
    user = await repository.get(user_id)
    if user is None:
        raise _not_found()
    return _to_user_response(user)


async def update_user(
    repository: UserRepository,
    user_id: int,
    payload: schemas.UserPayload,
) -> schemas.UserResponse:
    user = await repository.update(user_id, name=payload.name, email=payload.email)
    if user is None:
        raise _not_found()
    logger.info("Updated user id=%s", user.id)
    return _to_user_response(user)


async def delete_user(repository: UserRepository, user_id: int) -> schemas.DeleteResponse:
    # Deleting an id that does not exist is reported, not ignored.
    deleted = await repository.delete(user_id)
    if not deleted:
        raise _not_found()
    logger.info("Deleted user id=%s", user_id)
    return schemas.DeleteResponse(ok=True, id=user_id)
