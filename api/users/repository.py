"""
Users persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database

from .models import User


class UserRepository:
    def __init__(self, database: Database) -> None:
        self._db = database

    async def list_all(self) -> list[User]:
        rows = await self._db.fetch_all(
            """
            SELECT id, name, email
            FROM users
            ORDER BY id ASC
            """
        )
        return [User.from_row(row) for row in rows]

    async def create(self, *, name: str, email: str) -> User:
        row = await self._db.fetch_one(
            """
            INSERT INTO users (name, email)
            VALUES ($1, $2)
            RETURNING id, name, email
            """,
            name,
            email,
        )
        if row is None:
            raise RuntimeError("Failed to create user.")
        return User.from_row(row)

    async def get(self, user_id: int) -> User | None:
        row = await self._db.fetch_one(
            """
            SELECT id, name, email
            FROM users
            WHERE id = $1
            """,
            user_id,
        )
        return User.from_row(row) if row is not None else None

    async def update(self, user_id: int, *, name: str, email: str) -> User | None:
        row = await self._db.fetch_one(
            """
            UPDATE users
            SET name = $2,
                email = $3
            WHERE id = $1
            RETURNING id, name, email
            """,
            user_id,
            name,
            email,
        )
        return User.from_row(row) if row is not None else None

    async def delete(self, user_id: int) -> bool:
        row = await self._db.fetch_one(
            """
            DELETE FROM users
            WHERE id = $1
            RETURNING id
            """,
            user_id,
        )
        return row is not None
