"""
Pytest configuration and shared fixtures.
"""

import os

# Settings are read at import time; only tests marked integration open a database connection.
os.environ.setdefault("PGHOST", "localhost")
os.environ.setdefault("PGUSER", "bookapp")
os.environ.setdefault("PGDATABASE", "bookapp_test")
os.environ.setdefault("CREATE_SCHEMA", "false")

import pytest
from fastapi.testclient import TestClient

from bookapp.main import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def sample_user():
    """User row as returned by the database."""
    return {
        "id": 7,
        "username": "reader_7",
        "password": "Secret12!",
        "name": "Ada",
        "surname": "Lovelace",
        "image_link": None,
    }


@pytest.fixture
def sample_book():
    """Book row as returned by the database."""
    return {
        "id": 3,
        "name": "The Left Hand of Darkness",
        "description": "Winter, a planet of ice.",
        "image_link": "https://example.com/covers/3.jpg",
        "publication_year": 1969,
        "author_id": 2,
    }
