"""API routers package."""
from . import authors, books, categories, users

__all__ = ["authors", "books", "categories", "users"]
