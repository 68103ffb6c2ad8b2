"""Shared path parameter types."""
from typing import Annotated

from fastapi import Path

INT4_MIN = -2_147_483_648
INT4_MAX = 2_147_483_647

# Primary keys are SERIAL (int4) columns
RowId = Annotated[int, Path(ge=INT4_MIN, le=INT4_MAX)]
