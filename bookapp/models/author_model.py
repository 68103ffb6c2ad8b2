"""Author models."""
from typing import Optional

from .common_model import RecordModel


class Author(RecordModel):
    id: int
    name: str
    surname: Optional[str] = None
    biography: Optional[str] = None
    image_link: Optional[str] = None
