"""
Tests for the book service queries.
"""

from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import HTTPException

from bookapp.services import book_service


@pytest.mark.asyncio
async def test_get_book_by_id_returns_single_row(sample_book):
    with patch("bookapp.services.book_service.fetch", AsyncMock(return_value=[sample_book])) as fetch:
        book = await book_service.get_book_by_id(3)

    assert book == sample_book
    fetch.assert_awaited_once_with("SELECT * FROM books WHERE id = $1", 3)


@pytest.mark.asyncio
async def test_get_book_by_id_missing():
    with patch("bookapp.services.book_service.fetch", AsyncMock(return_value=[])):
        assert await book_service.get_book_by_id(99) is None


@pytest.mark.asyncio
async def test_get_book_by_id_duplicate_rows_is_server_error(sample_book):
    with patch("bookapp.services.book_service.fetch", AsyncMock(return_value=[sample_book, sample_book])):
        with pytest.raises(HTTPException) as exc_info:
            await book_service.get_book_by_id(3)

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == "Multiple books found with the same ID"


@pytest.mark.asyncio
async def test_random_books_limited_by_table_size(sample_book):
    with patch("bookapp.services.book_service.fetchval", AsyncMock(return_value=3)), \
         patch("bookapp.services.book_service.fetch", AsyncMock(return_value=[sample_book] * 3)) as fetch:
        books = await book_service.random_books(10)

    assert len(books) == 3
    fetch.assert_awaited_once_with("SELECT * FROM books ORDER BY random() LIMIT $1", 3)


@pytest.mark.asyncio
async def test_random_books_limited_by_cap():
    with patch("bookapp.services.book_service.fetchval", AsyncMock(return_value=250)), \
         patch("bookapp.services.book_service.fetch", AsyncMock(return_value=[])) as fetch:
        await book_service.random_books(10)

    assert fetch.await_args.args[1] == 10


@pytest.mark.asyncio
async def test_random_books_empty_table_skips_query():
    with patch("bookapp.services.book_service.fetchval", AsyncMock(return_value=0)), \
         patch("bookapp.services.book_service.fetch", AsyncMock()) as fetch:
        assert await book_service.random_books(10) == []

    fetch.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "average, expected",
    [
        (None, "0.0"),
        (Decimal("4.0000000000000000"), "4.0"),
        (Decimal("3.6666666666666667"), "3.7"),
        (Decimal("2.2500000000000000"), "2.3"),
        (Decimal("5"), "5.0"),
    ],
)
async def test_average_star_formatting(average, expected):
    with patch("bookapp.services.book_service.fetchval", AsyncMock(return_value=average)):
        assert await book_service.average_star(1) == expected


@pytest.mark.asyncio
async def test_book_exists():
    with patch("bookapp.services.book_service.fetchval", AsyncMock(side_effect=[1, 0])):
        assert await book_service.book_exists(1) is True
        assert await book_service.book_exists(2) is False
