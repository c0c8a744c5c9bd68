"""
pytest configuration and fixtures.
"""

from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from main import create_app
from users.dependencies import get_user_repository
from users.models import User


class InMemoryUserRepository:
    """Stands in for UserRepository; ids are assigned like a sequence."""

    def __init__(self):
        self.rows: dict[int, User] = {}
        self._next_id = 1

    async def list_all(self) -> list[User]:
        return [self.rows[k] for k in sorted(self.rows)]

    async def create(self, *, name: str, email: str) -> User:
        user = User(id=self._next_id, name=name, email=email)
        self.rows[user.id] = user
        self._next_id += 1
        return user

    async def get(self, user_id: int) -> User | None:
        return self.rows.get(user_id)

    async def update(self, user_id: int, *, name: str, email: str) -> User | None:
        if user_id not in self.rows:
            return None
        user = User(id=user_id, name=name, email=email)
        self.rows[user_id] = user
        return user

    async def delete(self, user_id: int) -> bool:
        return self.rows.pop(user_id, None) is not None


@pytest.fixture
def repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def app(repository: InMemoryUserRepository) -> FastAPI:
    """App wired to the in-memory repository. The lifespan is never entered."""
    app = create_app()
    app.dependency_overrides[get_user_repository] = lambda: repository
    return app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    yield TestClient(app)
    app.dependency_overrides.clear()
