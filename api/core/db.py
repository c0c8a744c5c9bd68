"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. FastAPI opens it on startup, keeps it on
`app.state.db` and closes it on shutdown (see `api/main.py`). Handlers get it
through `core.dependencies.get_database`.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from . import settings

logger = logging.getLogger(__name__)


def split_database_url(url: str) -> tuple[str, str | None]:
    """
    Pull `sslmode` out of the query string.

    asyncpg takes the SSL mode through its `ssl=` argument, so the DSN is
    returned without it.
    """
    parts = urlsplit(url)
    if not parts.query:
        return url, None

    sslmode: str | None = None
    params = []
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        if key == "sslmode":
            sslmode = value or None
            continue
        params.append((key, value))

    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment)), sslmode


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @property
    def pool(self) -> asyncpg.Pool:
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self._pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self._pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> None:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). No result returned.
        """
        await self._pool.execute(sql, *args)

    async def close(self) -> None:
        await self._pool.close()


async def connect(url: str | None = None) -> Database:
    dsn, sslmode = split_database_url(url or settings.database_url())
    pool = await asyncpg.create_pool(
        dsn=dsn,
        ssl=sslmode,
        min_size=settings.pool_min_size(),
        max_size=settings.pool_max_size(),
        command_timeout=settings.command_timeout(),
    )
    logger.info("Database pool opened (sslmode=%s)", sslmode or "default")
    return Database(pool)
