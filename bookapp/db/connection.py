"""Asyncpg connection utilities and the query executor used by the services."""
import asyncio
from pathlib import Path
from typing import Any, List, Optional

import asyncpg

from bookapp.config import settings
from bookapp.utils.logger import get_logger

logger = get_logger(__name__)

_pool: Optional[asyncpg.pool.Pool] = None
_pool_lock = asyncio.Lock()

SCHEMA_TABLES = ("authors", "categories", "books", "book_categories", "users", "book_stars")

DRIVER_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    asyncpg.exceptions.InternalClientError,
    asyncio.TimeoutError,
    OSError,
)


class DataAccessError(Exception):
    """A statement could not be executed against the database."""


def _password() -> Optional[str]:
    # None lets asyncpg fall back to trust auth / .pgpass for local development
    if settings.pg_password and settings.pg_password.strip():
        return settings.pg_password.strip()
    return None


async def ensure_database_exists() -> None:
    """Create the database if it doesn't exist."""
    try:
        conn = await asyncpg.connect(
            host=settings.pg_host,
            port=settings.pg_port,
            user=settings.pg_user,
            password=_password(),
            database="postgres",
        )
    except DRIVER_ERRORS as exc:
        # The role may not be allowed on the maintenance database; the pool
        # connects to the target database directly in that case.
        logger.warning("Could not check database %s via 'postgres': %s", settings.pg_database, exc)
        return

    try:
        db_exists = await conn.fetchval(
            "SELECT 1 FROM pg_database WHERE datname = $1",
            settings.pg_database,
        )
        if not db_exists:
            database = settings.pg_database.replace('"', '""')
            await conn.execute(f'CREATE DATABASE "{database}"')
            logger.info("Created database: %s", settings.pg_database)
        else:
            logger.info("Database exists: %s", settings.pg_database)
    finally:
        await conn.close()


async def ensure_schema_exists(pool: asyncpg.pool.Pool) -> None:
    """Create tables and indexes if they don't exist."""
    schema_path = Path(__file__).parent / "schema.sql"
    if not schema_path.exists():
        logger.warning("Schema file not found at %s", schema_path)
        return

    async with pool.acquire() as conn:
        table_count = await conn.fetchval(
            """
            SELECT COUNT(*)
            FROM information_schema.tables
            WHERE table_schema = 'public'
            AND table_name = ANY($1::text[])
            """,
            list(SCHEMA_TABLES),
        )
        if table_count < len(SCHEMA_TABLES):
            await conn.execute(schema_path.read_text())
            logger.info("Database schema created")
        else:
            logger.info("Database schema already exists")


async def init_db() -> asyncpg.pool.Pool:
    """Initialize database connection pool and ensure database/schema exist.

    Concurrent first callers share one pool.
    """
    global _pool
    async with _pool_lock:
        if _pool is None:
            if settings.create_schema:
                await ensure_database_exists()

            pool = await asyncpg.create_pool(
                host=settings.pg_host,
                port=settings.pg_port,
                user=settings.pg_user,
                password=_password(),
                database=settings.pg_database,
                min_size=1,
                max_size=settings.pg_pool_max_size,
            )

            if settings.create_schema:
                try:
                    await ensure_schema_exists(pool)
                except BaseException:
                    await pool.close()
                    raise

            _pool = pool

    return _pool


async def get_pool() -> asyncpg.pool.Pool:
    if _pool is None:
        return await init_db()
    return _pool


async def close_pool() -> None:
    global _pool, _pool_lock
    if _pool:
        await _pool.close()
        _pool = None
    # the lock binds to the loop it first waited on
    _pool_lock = asyncio.Lock()


async def _run(method: str, query: str, *args: Any) -> Any:
    try:
        pool = await get_pool()
        async with pool.acquire() as conn:
            return await getattr(conn, method)(query, *args)
    except DRIVER_ERRORS as exc:
        raise DataAccessError(f"{type(exc).__name__}: {exc}") from exc


async def fetch(query: str, *args: Any) -> List[asyncpg.Record]:
    """Run a query and return every row."""
    return await _run("fetch", query, *args)


async def fetchrow(query: str, *args: Any) -> Optional[asyncpg.Record]:
    """Run a query and return the first row, or None."""
    return await _run("fetchrow", query, *args)


async def fetchval(query: str, *args: Any) -> Any:
    """Run a query and return the first column of the first row."""
    return await _run("fetchval", query, *args)


async def execute(query: str, *args: Any) -> str:
    """Run a statement and return the command status, e.g. ``UPDATE 1``."""
    return await _run("execute", query, *args)
