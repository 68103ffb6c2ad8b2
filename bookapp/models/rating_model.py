"""Star rating models."""
from pydantic import BaseModel, field_validator
from pydantic_core import PydanticCustomError

MIN_STAR = 1
MAX_STAR = 5


class RatingRequest(BaseModel):
    star: int

    @field_validator("star")
    @classmethod
    def check_range(cls, value: int) -> int:
        if not MIN_STAR <= value <= MAX_STAR:
            raise PydanticCustomError(
                "star_range",
                "Invalid star rating. Please provide a value between 1 and 5.",
            )
        return value
