"""Category service helpers."""
from typing import List

import asyncpg

from bookapp.db.connection import fetch


async def list_categories() -> List[asyncpg.Record]:
    return await fetch("SELECT * FROM categories ORDER BY id")
