"""Pydantic models for API requests and responses."""
from .author_model import Author
from .book_model import Book, BookSummary
from .category_model import Category
from .common_model import ErrorResponse, MessageResponse, RecordModel
from .rating_model import RatingRequest
from .user_model import User, UserLogin, UserRegister, UserUpdate
