"""Category endpoints."""
from typing import List

from fastapi import APIRouter

from bookapp.models.category_model import Category
from bookapp.services import category_service
from bookapp.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("", response_model=List[Category])
async def list_categories():
    logger.info("Fetching all categories")
    categories = await category_service.list_categories()
    return [Category.from_db_record(category) for category in categories]
