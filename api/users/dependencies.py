"""
Users dependencies for FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends

from core.db import Database
from core.dependencies import get_database

from .repository import UserRepository


def get_user_repository(database: Database = Depends(get_database)) -> UserRepository:
    return UserRepository(database)
