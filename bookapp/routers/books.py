"""Book endpoints."""
from typing import List

from fastapi import APIRouter, HTTPException, Response, status

from bookapp.config import settings
from bookapp.models.book_model import Book, BookSummary
from bookapp.models.common_model import ErrorResponse
from bookapp.services import book_service
from bookapp.utils.logger import get_logger
from bookapp.utils.params import RowId

router = APIRouter()
logger = get_logger(__name__)


@router.get("", response_model=List[BookSummary])
async def list_books():
    """List all books with their cover image."""
    logger.info("Fetching all books")
    books = await book_service.list_books()
    return [BookSummary.from_db_record(book) for book in books]


@router.get("/recommendations", response_model=List[Book])
async def get_recommendations():
    """Random sample of books, at most the configured recommendation count."""
    logger.info("Fetching %s random books", settings.recommendation_count)
    books = await book_service.random_books(settings.recommendation_count)
    return [Book.from_db_record(book) for book in books]


@router.get(
    "/category/{category_id}",
    response_model=List[BookSummary],
    responses={404: {"model": ErrorResponse}},
)
async def list_books_by_category(category_id: RowId):
    logger.info("Fetching books for category %s", category_id)
    books = await book_service.list_books_by_category(category_id)
    if not books:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No books found for this category")
    return [BookSummary.from_db_record(book) for book in books]


@router.get(
    "/author/{author_id}",
    response_model=List[BookSummary],
    responses={404: {"model": ErrorResponse}},
)
async def list_books_by_author(author_id: RowId):
    logger.info("Fetching books for author %s", author_id)
    books = await book_service.list_books_by_author(author_id)
    if not books:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No books found for this author")
    return [BookSummary.from_db_record(book) for book in books]


@router.get("/{book_id}", response_model=Book, responses={404: {"model": ErrorResponse}})
async def get_book(book_id: RowId):
    """Get book details by ID."""
    logger.info("Fetching book with ID %s", book_id)
    book = await book_service.get_book_by_id(book_id)
    if not book:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return Book.from_db_record(book)


@router.get("/{book_id}/star", response_class=Response)
async def get_book_star(book_id: RowId):
    """Average star rating as a bare number with one decimal, e.g. ``4.0``."""
    logger.info("Fetching star rating for book with ID %s", book_id)
    average = await book_service.average_star(book_id)
    return Response(content=average, media_type="application/json")
