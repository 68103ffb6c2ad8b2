"""Category models."""
from .common_model import RecordModel


class Category(RecordModel):
    id: int
    name: str
