"""Author service helpers."""
from typing import List, Optional

import asyncpg

from bookapp.db.connection import fetch
from bookapp.utils.records import single_record


async def list_authors() -> List[asyncpg.Record]:
    return await fetch("SELECT * FROM authors ORDER BY id")


async def get_author_by_id(author_id: int) -> Optional[asyncpg.Record]:
    rows = await fetch("SELECT * FROM authors WHERE id = $1", author_id)
    return single_record(rows, "author", author_id)
