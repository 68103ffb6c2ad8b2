"""User service helpers."""
from typing import Optional

import asyncpg
from fastapi import HTTPException, status

from bookapp.db.connection import execute, fetch, fetchrow, fetchval
from bookapp.db.statements import EmptyUpdateError, build_update
from bookapp.models.user_model import UserUpdate
from bookapp.utils.records import single_record

# Assignment order of a partial update
USER_UPDATE_COLUMNS = ("username", "password", "name", "surname", "image_link")


async def create_user(
    name: str,
    username: str,
    password: str,
    surname: Optional[str] = None,
    image_link: Optional[str] = None,
) -> int:
    """Insert a user and return the generated ID."""
    return await fetchval(
        """
        INSERT INTO users (name, username, password, surname, image_link)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING id
        """,
        name,
        username,
        password,
        surname,
        image_link,
    )


async def get_user_by_username(username: str) -> Optional[asyncpg.Record]:
    return await fetchrow("SELECT * FROM users WHERE username = $1", username)


async def get_user_by_id(user_id: int) -> Optional[asyncpg.Record]:
    rows = await fetch("SELECT * FROM users WHERE id = $1", user_id)
    return single_record(rows, "user", user_id)


async def user_exists(user_id: int) -> bool:
    return await fetchval("SELECT COUNT(*) FROM users WHERE id = $1", user_id) > 0


async def is_duplicate_username(username: str, exclude_id: Optional[int] = None) -> bool:
    """Check whether ``username`` is taken, ignoring the user ``exclude_id``."""
    if exclude_id is None:
        count = await fetchval("SELECT COUNT(*) FROM users WHERE username = $1", username)
    else:
        count = await fetchval(
            "SELECT COUNT(*) FROM users WHERE username = $1 AND id <> $2",
            username,
            exclude_id,
        )
    return count > 0


async def update_user(user_id: int, changes: UserUpdate) -> Optional[asyncpg.Record]:
    """Apply the supplied fields of ``changes`` to a user and return the updated row.

    Nothing is written unless every check passes.
    """
    if not await user_exists(user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    try:
        changes.check_credentials()
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    try:
        statement = build_update(
            "users",
            USER_UPDATE_COLUMNS,
            changes.model_dump(exclude_none=True),
            key_column="id",
            key_value=user_id,
        )
    except EmptyUpdateError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update") from exc

    if changes.username is not None and await is_duplicate_username(changes.username, exclude_id=user_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already exists")

    await execute(statement.sql, *statement.params)
    return await get_user_by_id(user_id)
