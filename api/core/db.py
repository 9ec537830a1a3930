"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`). Handlers never talk to asyncpg
directly; they go through `fetch_one` / `fetch_all`, which acquire
a connection for the duration of one statement and always release it.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from core import encoding, settings

_pool: asyncpg.Pool | None = None

# Driver-level failures that surface to callers as DatabaseError.
DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)


class DatabaseError(RuntimeError):
    pass


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def connect_kwargs() -> dict[str, Any]:
    """
    Connection arguments shared by the pool and one-off script connections.

    `DATABASE_URL` wins when set; otherwise the discrete DB_* settings are used.
    """
    conf = settings.database_settings()
    kwargs: dict[str, Any] = {}
    url = settings.database_url()
    if url:
        kwargs["dsn"] = _sanitize_database_url(url)
    else:
        kwargs.update(
            host=conf.host,
            port=conf.port,
            user=conf.user,
            password=conf.password,
            database=conf.database,
        )
    if conf.ssl:
        kwargs["ssl"] = "require"
    return kwargs


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    # min_size=0 keeps startup independent of database reachability; the
    # first query opens the first connection.
    _pool = await asyncpg.create_pool(
        **connect_kwargs(),
        min_size=0,
        max_size=settings.pool_max_size(),
        command_timeout=30,
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise DatabaseError("Database not initialized. Call init_pool() first.")
    return _pool


async def connect() -> asyncpg.Connection:
    """
    Open a single connection outside the pool (used by one-shot scripts).
    """
    try:
        return await asyncpg.connect(**connect_kwargs(), timeout=10)
    except DRIVER_ERRORS as exc:
        raise DatabaseError(str(exc)) from exc


@asynccontextmanager
async def connection() -> AsyncIterator[asyncpg.Connection]:
    """
    Acquire a pooled connection for the duration of the block.
    """
    try:
        async with pool().acquire() as conn:
            yield conn
    except DRIVER_ERRORS as exc:
        raise DatabaseError(str(exc)) from exc


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return encoding.json_row(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    async with connection() as conn:
        row = await conn.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    async with connection() as conn:
        rows = await conn.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]
