"""
Schema auto-migration run once at startup.

Entity modules describe their table with `Table`/`Column`; `auto_migrate`
creates missing tables and adds missing columns. Nothing is ever dropped or
altered in place, and there are no versioned migration files.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .db import Database

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    name: str
    ddl: str

    @property
    def is_primary_key(self) -> bool:
        return "PRIMARY KEY" in self.ddl.upper()


@dataclass(frozen=True)
class Table:
    name: str
    columns: tuple[Column, ...]


def create_table_sql(table: Table) -> str:
    columns = ",\n    ".join(f"{c.name} {c.ddl}" for c in table.columns)
    return f"CREATE TABLE IF NOT EXISTS {table.name} (\n    {columns}\n)"


def add_columns_sql(table: Table) -> list[str]:
    # Primary keys only come from CREATE TABLE.
    return [
        f"ALTER TABLE {table.name} ADD COLUMN IF NOT EXISTS {c.name} {c.ddl}"
        for c in table.columns
        if not c.is_primary_key
    ]


async def auto_migrate(database: Database, *tables: Table) -> None:
    for table in tables:
        await database.execute(create_table_sql(table))
        for statement in add_columns_sql(table):
            await database.execute(statement)
        logger.info("Schema ready for table %s", table.name)
