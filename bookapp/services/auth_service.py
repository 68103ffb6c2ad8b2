"""Registration and login helpers."""
import asyncpg
from fastapi import HTTPException, status

from bookapp.models.user_model import UserRegister
from bookapp.services import user_service
from bookapp.utils.logger import get_logger

logger = get_logger(__name__)


async def register_user(payload: UserRegister) -> asyncpg.Record:
    """Create a user from a validated payload and return the stored row."""
    if await user_service.is_duplicate_username(payload.username):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already exists")
    user_id = await user_service.create_user(
        name=payload.name,
        username=payload.username,
        password=payload.password,
        surname=payload.surname,
        image_link=payload.image_link,
    )
    logger.info("Registered user %s with ID %s", payload.username, user_id)
    return await user_service.get_user_by_id(user_id)


async def login_user(username: str, password: str) -> asyncpg.Record:
    # Passwords are stored and compared as plain text.
    user = await user_service.get_user_by_username(username)
    if not user or user["password"] != password:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")
    return user
