"""
Helpers for building parameterized SQL.

Statements use PostgreSQL-style positional placeholders (``$1``, ``$2``, ...);
app.core.database.run_query binds them on whatever engine is configured.
Only column names are ever interpolated into the SQL text. Values always
travel separately as parameters.
"""

from typing import Any, Dict, Mapping, NamedTuple, Optional, Tuple

from app.core.exceptions import MissingDataError


class SqlFragment(NamedTuple):
    """SQL text and the values for its placeholders, in placeholder order."""
    clause: str
    values: Tuple[Any, ...]


def placeholder(position: int) -> str:
    """Positional placeholder for the 1-based parameter ``position``."""
    return f"${position}"


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    field_name_map: Optional[Dict[str, str]] = None,
) -> SqlFragment:
    """
    Build the SET clause of an UPDATE that changes only the given fields.

    Keys are rendered in the order they appear in ``data_to_update`` and each
    is numbered by its position. A key found in ``field_name_map`` is written
    as the mapped column name, otherwise the key itself is used.

    Keys must come from an application-defined allow-list; they are quoted
    but not otherwise sanitized.

    Example:
        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        SqlFragment(clause='"first_name"=$1, "age"=$2', values=('Aliya', 32))

    Raises:
        MissingDataError: If ``data_to_update`` is empty
    """
    keys = list(data_to_update)
    if not keys:
        raise MissingDataError("No data")

    field_name_map = field_name_map or {}
    cols = [
        f'"{field_name_map.get(key, key)}"={placeholder(idx)}'
        for idx, key in enumerate(keys, start=1)
    ]

    return SqlFragment(
        clause=", ".join(cols),
        values=tuple(data_to_update[key] for key in keys),
    )
