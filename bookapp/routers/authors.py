"""Author endpoints."""
from typing import List

from fastapi import APIRouter, HTTPException, status

from bookapp.models.author_model import Author
from bookapp.models.common_model import ErrorResponse
from bookapp.services import author_service
from bookapp.utils.logger import get_logger
from bookapp.utils.params import RowId

router = APIRouter()
logger = get_logger(__name__)


@router.get("", response_model=List[Author])
async def list_authors():
    logger.info("Fetching all authors")
    authors = await author_service.list_authors()
    return [Author.from_db_record(author) for author in authors]


@router.get("/{author_id}", response_model=Author, responses={404: {"model": ErrorResponse}})
async def get_author(author_id: RowId):
    logger.info("Fetching author with ID %s", author_id)
    author = await author_service.get_author_by_id(author_id)
    if not author:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")
    return Author.from_db_record(author)
