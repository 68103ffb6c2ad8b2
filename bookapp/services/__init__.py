"""Services package."""
from . import (
    author_service,
    auth_service,
    book_service,
    category_service,
    rating_service,
    user_service,
)

__all__ = [
    "author_service",
    "auth_service",
    "book_service",
    "category_service",
    "rating_service",
    "user_service",
]
