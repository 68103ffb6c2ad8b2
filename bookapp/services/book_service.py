"""Book service helpers."""
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional

import asyncpg

from bookapp.db.connection import fetch, fetchval
from bookapp.utils.records import single_record


async def list_books() -> List[asyncpg.Record]:
    """List every book as a summary row."""
    return await fetch("SELECT id, name, image_link FROM books ORDER BY id")


async def get_book_by_id(book_id: int) -> Optional[asyncpg.Record]:
    """Get a book by its ID."""
    rows = await fetch("SELECT * FROM books WHERE id = $1", book_id)
    return single_record(rows, "book", book_id)


async def list_books_by_category(category_id: int) -> List[asyncpg.Record]:
    return await fetch(
        """
        SELECT b.id, b.name, b.image_link
        FROM books b
        JOIN book_categories bc ON b.id = bc.book_id
        WHERE bc.category_id = $1
        ORDER BY b.id
        """,
        category_id,
    )


async def list_books_by_author(author_id: int) -> List[asyncpg.Record]:
    return await fetch(
        "SELECT id, name, image_link FROM books WHERE author_id = $1 ORDER BY id",
        author_id,
    )


async def count_books() -> int:
    return await fetchval("SELECT COUNT(*) FROM books")


async def book_exists(book_id: int) -> bool:
    return await fetchval("SELECT COUNT(*) FROM books WHERE id = $1", book_id) > 0


async def random_books(limit: int) -> List[asyncpg.Record]:
    """Sample up to ``limit`` books in random order, never more than exist."""
    count = min(limit, await count_books())
    if count <= 0:
        return []
    return await fetch("SELECT * FROM books ORDER BY random() LIMIT $1", count)


async def average_star(book_id: int) -> str:
    """Mean star rating of a book with one decimal, ``"0.0"`` when unrated."""
    average = await fetchval("SELECT AVG(star) FROM book_stars WHERE book_id = $1", book_id)
    if average is None:
        return "0.0"
    rounded = Decimal(str(average)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return str(rounded)
