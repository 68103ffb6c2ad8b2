"""Quick script to load a small sample catalogue for development/testing."""
import asyncio
import sys
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from bookapp.db.connection import close_pool, init_db
from bookapp.utils.logger import get_logger

logger = get_logger("seed_sample")

AUTHORS = [
    (1, "Fyodor", "Dostoevsky", "Russian novelist and essayist."),
    (2, "Ursula K.", "Le Guin", "American author of speculative fiction."),
    (3, "Italo", "Calvino", "Italian journalist and writer."),
]

CATEGORIES = [
    (1, "Classics"),
    (2, "Science Fiction"),
    (3, "Fantasy"),
]

# (id, name, author_id, publication_year, category ids)
BOOKS = [
    (1, "Crime and Punishment", 1, 1866, [1]),
    (2, "The Brothers Karamazov", 1, 1880, [1]),
    (3, "The Left Hand of Darkness", 2, 1969, [2]),
    (4, "A Wizard of Earthsea", 2, 1968, [3]),
    (5, "The Dispossessed", 2, 1974, [2]),
    (6, "Invisible Cities", 3, 1972, [1, 3]),
]


async def seed() -> None:
    pool = await init_db()
    async with pool.acquire() as conn:
        async with conn.transaction():
            await conn.executemany(
                """
                INSERT INTO authors (id, name, surname, biography)
                VALUES ($1, $2, $3, $4)
                ON CONFLICT (id) DO NOTHING
                """,
                AUTHORS,
            )
            await conn.executemany(
                "INSERT INTO categories (id, name) VALUES ($1, $2) ON CONFLICT (id) DO NOTHING",
                CATEGORIES,
            )
            await conn.executemany(
                """
                INSERT INTO books (id, name, author_id, publication_year)
                VALUES ($1, $2, $3, $4)
                ON CONFLICT (id) DO NOTHING
                """,
                [(book_id, name, author_id, year) for book_id, name, author_id, year, _ in BOOKS],
            )
            await conn.executemany(
                """
                INSERT INTO book_categories (book_id, category_id)
                VALUES ($1, $2)
                ON CONFLICT DO NOTHING
                """,
                [(book[0], category_id) for book in BOOKS for category_id in book[4]],
            )
            # Explicit ids above do not advance the SERIAL sequences
            for table in ("authors", "categories", "books"):
                await conn.execute(
                    f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), "
                    f"(SELECT COALESCE(MAX(id), 1) FROM {table}))"
                )
    logger.info(
        "Seeded %s authors, %s categories and %s books",
        len(AUTHORS),
        len(CATEGORIES),
        len(BOOKS),
    )


async def main():
    try:
        await seed()
    finally:
        await close_pool()


if __name__ == "__main__":
    asyncio.run(main())
