"""Strict per-kind coercion of JSON values.

Each helper accepts one parsed JSON value (``None`` for JSON ``null``)
and either returns the field value or raises :class:`TypeError` naming
the JSON type it found.  The row decoder attaches position and field
context to that error.

JSON booleans parse to Python ``bool``, which is a subclass of ``int``;
every numeric helper rejects them explicitly.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from skystates.models.state_vector import PositionSource


def json_type_name(value: Any) -> str:
    """Name the JSON type of a parsed value, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _mismatch(expected: str, value: Any) -> TypeError:
    return TypeError(f"expected {expected}, got {json_type_name(value)}")


def is_json_integer(value: Any) -> bool:
    """Return ``True`` for a JSON number without a fractional part."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def to_optional_str(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise _mismatch("string or null", value)
    return value


def to_optional_float(value: Any) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _mismatch("number or null", value)
    try:
        return float(value)
    except OverflowError as exc:
        raise TypeError("number is out of range for a float") from exc


def to_flag(value: Any) -> bool:
    """Boolean field: ``null`` collapses to ``False``."""
    if value is None:
        return False
    if not isinstance(value, bool):
        raise _mismatch("boolean or null", value)
    return value


def to_optional_int_list(value: Any) -> tuple[int, ...] | None:
    """Integer list field: ``null`` is absent, ``[]`` is an empty tuple."""
    if value is None:
        return None
    if not isinstance(value, (list, tuple)):
        raise _mismatch("array of integers or null", value)
    items: list[int] = []
    for index, item in enumerate(value):
        if not is_json_integer(item):
            raise TypeError(f"expected integer at serials[{index}], got {json_type_name(item)}")
        items.append(int(item))
    return tuple(items)


def to_position_source(value: Any) -> PositionSource:
    """Map a raw position-source integer; ``null`` and unmapped values are ``UNKNOWN``."""
    if value is None:
        return PositionSource.UNKNOWN
    if not is_json_integer(value):
        raise _mismatch("integer or null", value)
    return PositionSource(int(value))


def to_epoch_seconds(value: Any) -> int:
    """Snapshot ``time``: ``null`` defaults to ``0``."""
    if value is None:
        return 0
    if not is_json_integer(value):
        raise _mismatch("integer or null", value)
    return int(value)
