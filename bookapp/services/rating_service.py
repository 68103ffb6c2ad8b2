"""Star rating helpers. A user holds at most one rating per book."""
from fastapi import HTTPException, status

from bookapp.db.connection import execute, fetchval
from bookapp.services import book_service, user_service


async def _ensure_book_and_user(user_id: int, book_id: int) -> None:
    if not await book_service.book_exists(book_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    if not await user_service.user_exists(user_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User not found")


async def get_rating(user_id: int, book_id: int) -> int:
    await _ensure_book_and_user(user_id, book_id)
    star = await fetchval(
        "SELECT star FROM book_stars WHERE book_id = $1 AND user_id = $2",
        book_id,
        user_id,
    )
    if star is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Rating not found for this user and book",
        )
    return star


async def save_rating(user_id: int, book_id: int, star: int) -> None:
    """Insert the rating, or overwrite the star of an existing one."""
    await _ensure_book_and_user(user_id, book_id)
    await execute(
        """
        INSERT INTO book_stars (user_id, book_id, star)
        VALUES ($1, $2, $3)
        ON CONFLICT (user_id, book_id) DO UPDATE SET star = EXCLUDED.star
        """,
        user_id,
        book_id,
        star,
    )
