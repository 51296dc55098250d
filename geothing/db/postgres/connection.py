"""PostgreSQL connection management.

This module owns the asyncpg pool and the ``Database`` handle the repositories
run their statements through. Connections are acquired per statement and
released right after.
"""

import asyncio
import json
import logging
from typing import Any

import asyncpg

from geothing.core.errors import OperationCancelledError, StorageError
from geothing.core.settings import get_settings

logger = logging.getLogger(__name__)

_pool: asyncpg.Pool | None = None


async def init_connection(conn: asyncpg.Connection) -> None:
    """Decode json and jsonb columns to Python objects."""
    for type_name in ("json", "jsonb"):
        await conn.set_type_codec(
            type_name,
            encoder=json.dumps,
            decoder=json.loads,
            schema="pg_catalog",
        )


async def get_db_pool() -> asyncpg.Pool:
    """Get the database connection pool as a dependency."""
    global _pool
    if _pool is None:
        settings = get_settings()
        _pool = await asyncpg.create_pool(
            user=settings.postgres_user,
            password=settings.postgres_password,
            host=settings.postgres_host,
            port=settings.postgres_port,
            database=settings.database_name,
            min_size=settings.postgres_pool_min_size,
            max_size=settings.postgres_pool_max_size,
            init=init_connection,
        )
        logger.info(
            "database pool created",
            extra={"host": settings.postgres_host, "db": settings.database_name},
        )

    return _pool


async def close_db_pool() -> None:
    """Close the database connection pool."""
    global _pool
    if _pool:
        await _pool.close()
        _pool = None


def rows_affected(status: str) -> int:
    """Extract the row count from a command status such as ``UPDATE 1``."""
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (ValueError, IndexError):
        return 0


class Database:
    """Thin handle over the pool exposing the primitives repositories need.

    Every database failure is re-raised as ``StorageError`` with its cause
    chained; a statement exceeding ``command_timeout`` raises
    ``OperationCancelledError``. Task cancellation propagates untouched.
    """

    def __init__(self, pool: asyncpg.Pool, command_timeout: float | None = None):
        self.pool = pool
        self.command_timeout = command_timeout

    async def _run(self, method: str, query: str, *args: Any) -> Any:
        call = getattr(self.pool, method)
        try:
            return await call(query, *args, timeout=self.command_timeout)
        except asyncio.TimeoutError as e:
            logger.warning("statement timed out after %ss", self.command_timeout)
            raise OperationCancelledError() from e
        except (asyncpg.PostgresError, asyncpg.InterfaceError, OSError) as e:
            logger.error("statement failed: %s", e, extra={"query": query})
            raise StorageError() from e

    async def fetch(self, query: str, *args: Any) -> list[asyncpg.Record]:
        return await self._run("fetch", query, *args)

    async def fetchrow(self, query: str, *args: Any) -> asyncpg.Record | None:
        return await self._run("fetchrow", query, *args)

    async def fetchval(self, query: str, *args: Any) -> Any:
        return await self._run("fetchval", query, *args)

    async def get_query_int(self, query: str, *args: Any) -> int:
        """Run a scalar query and return its value as an int (0 when NULL)."""
        value = await self.fetchval(query, *args)
        return int(value or 0)

    async def exec_action_query(self, query: str, *args: Any) -> int:
        """Run an INSERT, UPDATE or DELETE and return the number of rows affected."""
        status = await self._run("execute", query, *args)
        return rows_affected(status)


async def get_database() -> Database:
    """Dependency providing a Database handle over the shared pool."""
    pool = await get_db_pool()
    return Database(pool, command_timeout=get_settings().db_command_timeout)
