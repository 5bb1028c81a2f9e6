"""
Typed value extraction over parsed JSON.

The payloads are loosely typed, so every read goes through one of these
accessors. Each either returns a value of the requested type or raises
MissingOrInvalidField; there are no partial results.

JSON booleans are never accepted as numbers, even though ``bool`` is a
subclass of ``int`` in Python.
"""

import math
from typing import Optional

from ..errors import MissingOrInvalidField


_MISSING = object()


def _lookup(obj: dict, key: str):
    if not isinstance(obj, dict):
        raise MissingOrInvalidField(key, "read from a non-object value")
    return obj.get(key, _MISSING)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def get_string(obj: dict, key: str) -> str:
    """Return a required string field."""
    value = _lookup(obj, key)
    if value is _MISSING or value is None:
        raise MissingOrInvalidField(key)
    if not isinstance(value, str):
        raise MissingOrInvalidField(key, f"not a string ({type(value).__name__})")
    return value


def get_string_or(obj: dict, key: str, default: Optional[str]) -> Optional[str]:
    """
    Return a string field, or ``default`` when it cannot be read.

    Never raises: a missing key, a null value and a non-string value all
    give ``default``.
    """
    if not isinstance(obj, dict):
        return default
    value = obj.get(key)
    if isinstance(value, str):
        return value
    return default


def get_optional_string(obj: dict, key: str) -> Optional[str]:
    """Return a string field, None when missing or null."""
    value = _lookup(obj, key)
    if value is _MISSING or value is None:
        return None
    if not isinstance(value, str):
        raise MissingOrInvalidField(key, f"not a string ({type(value).__name__})")
    return value


def get_number(obj: dict, key: str) -> float:
    """Return a required numeric field as float."""
    value = _lookup(obj, key)
    if value is _MISSING or value is None:
        raise MissingOrInvalidField(key)
    if not _is_number(value):
        raise MissingOrInvalidField(key, f"not a number ({type(value).__name__})")
    return float(value)


def get_optional_number(obj: dict, key: str) -> Optional[float]:
    """Return a numeric field as float, None when missing or null."""
    value = _lookup(obj, key)
    if value is _MISSING or value is None:
        return None
    if not _is_number(value):
        raise MissingOrInvalidField(key, f"not a number ({type(value).__name__})")
    return float(value)


def get_int(obj: dict, key: str) -> int:
    """Return a required numeric field truncated to int."""
    value = get_number(obj, key)
    if not math.isfinite(value):
        raise MissingOrInvalidField(key, f"not a finite number ({value})")
    return int(value)


def get_bool(obj: dict, key: str) -> bool:
    """Return a required boolean field."""
    value = _lookup(obj, key)
    if value is _MISSING or value is None:
        raise MissingOrInvalidField(key)
    if not isinstance(value, bool):
        raise MissingOrInvalidField(key, f"not a boolean ({type(value).__name__})")
    return value


def get_object(obj: dict, key: str) -> dict:
    """Return a required nested object."""
    value = _lookup(obj, key)
    if value is _MISSING or value is None:
        raise MissingOrInvalidField(key)
    if not isinstance(value, dict):
        raise MissingOrInvalidField(key, f"not an object ({type(value).__name__})")
    return value


def get_array(obj: dict, key: str) -> list:
    """Return a required array."""
    value = _lookup(obj, key)
    if value is _MISSING or value is None:
        raise MissingOrInvalidField(key)
    if not isinstance(value, list):
        raise MissingOrInvalidField(key, f"not an array ({type(value).__name__})")
    return value


def get_object_items(obj: dict, key: str) -> list:
    """Return a required array whose every element must be an object."""
    items = get_array(obj, key)
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise MissingOrInvalidField(f"{key}[{index}]", "not an object")
    return items
