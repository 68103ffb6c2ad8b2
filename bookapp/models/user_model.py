"""User models."""
from typing import Optional

from pydantic import model_validator
from pydantic_core import PydanticCustomError

from bookapp.utils.validation import is_valid_password, is_valid_username

from .common_model import RecordModel


class User(RecordModel):
    """User response model.

    The stored password is part of the row and is returned as is.
    """

    id: int
    username: str
    password: str
    name: str
    surname: Optional[str] = None
    image_link: Optional[str] = None


class UserLogin(RecordModel):
    username: str
    password: str


class UserRegister(RecordModel):
    """Registration payload. Checks run in order and stop at the first failure."""

    name: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    surname: Optional[str] = None
    image_link: Optional[str] = None

    @model_validator(mode="after")
    def check_credentials(self):
        if not self.name:
            raise PydanticCustomError("name_required", "Name is required")
        if not is_valid_username(self.username):
            raise PydanticCustomError("invalid_username", "Invalid username format")
        if not is_valid_password(self.password):
            raise PydanticCustomError("invalid_password", "Invalid password format")
        return self


class UserUpdate(RecordModel):
    """Partial update payload; absent and null fields are left untouched.

    Formats are not checked while parsing: the user must be known to exist
    first, see ``check_credentials``.
    """

    username: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    surname: Optional[str] = None
    image_link: Optional[str] = None

    def check_credentials(self) -> None:
        """Raise ValueError with the message of the first supplied field in a bad format."""
        if self.username is not None and not is_valid_username(self.username):
            raise ValueError("Invalid username format")
        if self.password is not None and not is_valid_password(self.password):
            raise ValueError("Invalid password format")
