"""
Tests for the pool lifecycle and the query executor.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import asyncpg
import pytest

from bookapp.db import connection
from bookapp.db.connection import DataAccessError


@pytest.mark.asyncio
async def test_concurrent_first_callers_share_one_pool():
    pool = AsyncMock()

    async def slow_create_pool(**kwargs):
        await asyncio.sleep(0.01)
        return pool

    with patch.object(connection.settings, "create_schema", False), \
         patch("bookapp.db.connection.asyncpg.create_pool", AsyncMock(side_effect=slow_create_pool)) as create_pool:
        try:
            pools = await asyncio.gather(*(connection.get_pool() for _ in range(5)))
        finally:
            await connection.close_pool()

    assert create_pool.await_count == 1
    assert all(p is pool for p in pools)
    pool.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_failed_schema_setup_closes_pool():
    pool = AsyncMock()

    with patch.object(connection.settings, "create_schema", True), \
         patch("bookapp.db.connection.ensure_database_exists", AsyncMock()), \
         patch("bookapp.db.connection.ensure_schema_exists", AsyncMock(side_effect=OSError("disk"))), \
         patch("bookapp.db.connection.asyncpg.create_pool", AsyncMock(return_value=pool)):
        with pytest.raises(OSError):
            await connection.init_db()

    assert connection._pool is None
    pool.close.assert_awaited_once()


@pytest.mark.parametrize(
    "error",
    [
        asyncio.TimeoutError(),
        asyncpg.exceptions.InternalClientError("cannot switch to state 7"),
        ConnectionRefusedError("connection refused"),
    ],
)
@pytest.mark.asyncio
async def test_driver_errors_become_data_access_errors(error):
    with patch("bookapp.db.connection.get_pool", AsyncMock(side_effect=error)):
        with pytest.raises(DataAccessError) as exc_info:
            await connection.fetch("SELECT 1")

    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_programming_errors_are_not_wrapped():
    pool = MagicMock()
    pool.acquire.return_value.__aenter__.return_value.fetchval = AsyncMock(side_effect=KeyError("id"))

    with patch("bookapp.db.connection.get_pool", AsyncMock(return_value=pool)):
        with pytest.raises(KeyError):
            await connection.fetchval("SELECT 1")
