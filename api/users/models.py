"""
User entity and its table mapping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core.migrations import Column, Table

# Upper bound of the BIGSERIAL id column.
MAX_USER_ID = 2**63 - 1

USERS_TABLE = Table(
    name="users",
    columns=(
        Column("id", "BIGSERIAL PRIMARY KEY"),
        Column("name", "TEXT NOT NULL DEFAULT ''"),
        Column("email", "TEXT NOT NULL DEFAULT ''"),
    ),
)


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> User:
        return cls(
            id=int(row["id"]),
            name=str(row["name"]),
            email=str(row["email"]),
        )
