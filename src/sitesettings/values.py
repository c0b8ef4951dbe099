"""Scalar/structured tagging for setting values.

Only scalar values (str, int, float, bool) fit in the single ``value`` column;
anything else can live in the cache but is never written to storage.
"""

from __future__ import annotations

from typing import Any, Union

Scalar = Union[str, int, float, bool]

SCALAR_TYPES = (str, int, float, bool)


def is_scalar(value: Any) -> bool:
    """True when ``value`` may be persisted as a setting value."""
    return isinstance(value, SCALAR_TYPES)


def to_stored(value: Scalar) -> str:
    """Return the column representation of a scalar value."""
    if not is_scalar(value):
        raise TypeError(f"Cannot persist non-scalar setting value of type {type(value).__name__}")
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
