"""Core value tags for rpcmsg.

Decoded JSON is handled as plain Python values (dict, list, str, int, float,
bool, None). Every check on a value goes through kind_of(), which maps the
value to a ValueKind tag. ABSENT marks a member that was never supplied and
is kept distinct from None, which is JSON null.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Final


class _Absent:
    """Type of the ABSENT sentinel."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> _Absent:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Absent:
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT: Final = _Absent()


class ValueKind(str, Enum):
    """Kind of a JSON value, plus ABSENT for a missing member."""

    ABSENT = "absent"
    NULL = "null"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


class Kind(str, Enum):
    """Classification label of a parsed message."""

    REQUEST = "request"
    NOTIFICATION = "notification"
    SUCCESS = "success"
    ERROR = "error"
    INVALID = "invalid"


def kind_of(value: Any) -> ValueKind:
    """Tag a Python value with its JSON kind.

    Args:
        value: A decoded JSON value, or ABSENT.

    Returns:
        The ValueKind of the value.

    Raises:
        TypeError: If the value has no JSON representation.
    """
    if value is ABSENT:
        return ValueKind.ABSENT
    if value is None:
        return ValueKind.NULL
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    raise TypeError(f"not a JSON value: {type(value).__name__}")


def is_present(value: Any) -> bool:
    """Return True if the member was supplied (null counts as supplied)."""
    return value is not ABSENT
