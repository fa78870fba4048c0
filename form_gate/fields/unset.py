"""Sentinel for "no value has ever been provided".

An empty string is a legitimate, user-confirmed value for some fields, so
"never set" is tracked with a dedicated singleton and compared by identity.
"""

from typing import Any


class Unset:
    """Type of the UNSET sentinel. There is exactly one instance."""

    _instance: "Unset | None" = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "Unset":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Unset":
        return self

    def __reduce__(self) -> str:
        return "UNSET"


UNSET = Unset()

FieldValue = str | Unset


def is_set(value: Any) -> bool:
    """Return True if value is anything other than the UNSET sentinel."""
    return value is not UNSET


def has_content(value: Any) -> bool:
    """Return True if value is set and is a non-empty string."""
    return value is not UNSET and value != ""
