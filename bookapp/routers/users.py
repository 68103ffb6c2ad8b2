"""User endpoints: profile, registration, login and star ratings."""
from fastapi import APIRouter, HTTPException, status

from bookapp.models.common_model import ErrorResponse, MessageResponse
from bookapp.models.rating_model import RatingRequest
from bookapp.models.user_model import User, UserLogin, UserRegister, UserUpdate
from bookapp.services import auth_service, rating_service, user_service
from bookapp.utils.logger import get_logger
from bookapp.utils.params import RowId

router = APIRouter()
logger = get_logger(__name__)


@router.post("/login", response_model=User, responses={401: {"model": ErrorResponse}})
async def login(payload: UserLogin):
    """Check a username/password pair and return the matching user."""
    logger.info("Login attempt with username: %s", payload.username)
    user = await auth_service.login_user(payload.username, payload.password)
    return User.from_db_record(user)


@router.post(
    "/register",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def register(payload: UserRegister):
    """Create a user and return the stored row."""
    logger.info("Registering new user: %s", payload.username)
    user = await auth_service.register_user(payload)
    return User.from_db_record(user)


@router.get("/{user_id}", response_model=User, responses={404: {"model": ErrorResponse}})
async def get_user(user_id: RowId):
    logger.info("Fetching user with ID %s", user_id)
    user = await user_service.get_user_by_id(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return User.from_db_record(user)


@router.put(
    "/{user_id}",
    response_model=User,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_user(user_id: RowId, payload: UserUpdate):
    """Update the supplied fields of a user; omitted or null fields keep their value."""
    logger.info("Updating user with ID %s", user_id)
    user = await user_service.update_user(user_id, payload)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return User.from_db_record(user)


@router.get(
    "/{user_id}/star/{book_id}",
    response_model=int,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_star(user_id: RowId, book_id: RowId):
    """Star given by a user to a book."""
    logger.info("Fetching star rating for book %s and user %s", book_id, user_id)
    return await rating_service.get_rating(user_id, book_id)


@router.post(
    "/{user_id}/star/{book_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def rate_book(user_id: RowId, book_id: RowId, payload: RatingRequest):
    """Rate a book from 1 to 5; rating it again replaces the previous star."""
    logger.info("Updating star rating for book %s and user %s", book_id, user_id)
    await rating_service.save_rating(user_id, book_id, payload.star)
    return MessageResponse(message="Star rating updated successfully")
