"""Shared response models."""
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Validator error types whose message is returned to clients verbatim
DOMAIN_ERROR_TYPES = frozenset({"name_required", "invalid_username", "invalid_password", "star_range"})


class RecordModel(BaseModel):
    """Row of a table, serialized with camelCase keys (``image_link`` -> ``imageLink``)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @classmethod
    def from_db_record(cls, record: Mapping[str, Any]):
        """Create the model from an asyncpg record or a plain mapping."""
        return cls.model_validate(dict(record))


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[Any] = None


class MessageResponse(BaseModel):
    message: str
