"""Conversions for the loosely typed values Plex.tv hands back.

XML attributes arrive as strings ("1", "0", "") and JSON fields may be
missing entirely, so every model field goes through one of these helpers.
"""

from typing import Any

_FALSY_STRINGS = frozenset({"", "0", "false", "no", "off"})


def to_bool(value: Any) -> bool:
    """Absent or falsy values map to False, anything else to True."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in _FALSY_STRINGS
    return bool(value)


def to_optional_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def to_optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def to_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
