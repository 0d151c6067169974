"""Helpers for building parameterized SQL."""

from enum import Enum
from typing import Any, Dict, List, Mapping, NamedTuple

from sharebnb.errors import ValidationError


class UserField(str, Enum):
    """Fields of a user that a partial update may change."""
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PASSWORD = "password"


# Logical name -> column, only where the two differ
USER_COLUMNS: Dict[UserField, str] = {
    UserField.FIRST_NAME: "first_name",
    UserField.LAST_NAME: "last_name",
}


class PartialUpdate(NamedTuple):
    fragments: List[str]
    values: List[Any]

    @property
    def set_cols(self) -> str:
        return ", ".join(self.fragments)


def sql_for_partial_update(data: Mapping[Any, Any], columns: Mapping[Any, str]) -> PartialUpdate:
    """Build the SET clause of an UPDATE from a sparse field mapping.

    Only the keys present in ``data`` are emitted, in insertion order. Keys
    found in ``columns`` are translated to their column name, the rest are
    used as-is. Values are never interpolated: each becomes a ``$n``
    placeholder with the value at the same position in ``values``.

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        PartialUpdate(fragments=['"first_name"=$1', '"age"=$2'], values=['Aliya', 32])

    Raises ValidationError when ``data`` is empty.
    """
    if not data:
        raise ValidationError("No data")

    fragments = []
    for idx, key in enumerate(data, start=1):
        column = columns.get(key, key.value if isinstance(key, Enum) else key)
        fragments.append(f'"{column}"=${idx}')

    return PartialUpdate(fragments, list(data.values()))
