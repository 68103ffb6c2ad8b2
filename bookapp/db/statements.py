"""Builders for parameterized SQL statements."""
import re
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Tuple

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class EmptyUpdateError(ValueError):
    """No column was left to assign in an UPDATE."""


@dataclass(frozen=True)
class Statement:
    sql: str
    params: Tuple[Any, ...]


def _identifier(name: str) -> str:
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid SQL identifier: {name!r}")
    return name


def build_update(
    table: str,
    columns: Sequence[str],
    values: Mapping[str, Any],
    key_column: str = "id",
    key_value: Any = None,
) -> Statement:
    """Build ``UPDATE table SET ... WHERE key_column = $n`` from optional values.

    Assignments follow the order of ``columns``; a column is assigned only when
    ``values`` holds a non-None entry for it. Keys of ``values`` outside
    ``columns`` are ignored. Every value, the key included, is a bound
    parameter.

    Raises:
        EmptyUpdateError: when none of ``columns`` has a value to set.
    """
    assignments = []
    params = []
    for column in columns:
        value = values.get(column)
        if value is None:
            continue
        params.append(value)
        assignments.append(f"{_identifier(column)} = ${len(params)}")

    if not assignments:
        raise EmptyUpdateError(f"No fields to update in {table}")

    params.append(key_value)
    sql = (
        f"UPDATE {_identifier(table)} SET {', '.join(assignments)} "
        f"WHERE {_identifier(key_column)} = ${len(params)}"
    )
    return Statement(sql=sql, params=tuple(params))
