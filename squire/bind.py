"""Converting Python values into values SQLite can bind as parameters."""

from __future__ import annotations

from typing import Union

from .blob import Reservation

__all__ = ["BindError", "BindValue", "to_bind_value"]

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

BindValue = Union[None, int, float, str, bytes]


class BindError(ValueError):
    """Raised when a value cannot be bound as a statement parameter."""


def to_bind_value(value: object) -> BindValue:
    """Convert ``value`` into a type SQLite binds directly.

    Booleans become ``1`` or ``0``; integers must fit in a signed 64-bit
    parameter; byte-like values become ``bytes``; a :class:`Reservation`
    becomes a zero-filled blob of its length. ``None`` binds as ``NULL``.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, int):
        if not _I64_MIN <= value <= _I64_MAX:
            raise BindError("integer value cannot fit in i64 parameter")
        return int(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, str):
        return str(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, Reservation):
        return bytes(len(value))
    raise TypeError(f"cannot bind value of type {type(value).__name__}")