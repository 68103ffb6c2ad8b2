"""Helpers for rows returned by key lookups."""
from typing import Any, Optional, Sequence

from fastapi import HTTPException, status

from bookapp.utils.logger import get_logger

logger = get_logger(__name__)


def single_record(rows: Sequence[Any], entity: str, key: Any) -> Optional[Any]:
    """Return the only row of a primary-key lookup, or None when there is none.

    More than one row for a primary key is a data-integrity anomaly and is
    answered with a 500.
    """
    if len(rows) > 1:
        logger.error("Multiple %s rows found with the same ID: %s", entity, key)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Multiple {entity}s found with the same ID",
        )
    return rows[0] if rows else None
