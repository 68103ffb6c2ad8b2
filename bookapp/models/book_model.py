"""Book models."""
from typing import Optional

from .common_model import RecordModel


class BookSummary(RecordModel):
    """Book as listed in collections: id, name and cover image."""

    id: int
    name: str
    image_link: Optional[str] = None


class Book(BookSummary):
    description: Optional[str] = None
    publication_year: Optional[int] = None
    author_id: Optional[int] = None
