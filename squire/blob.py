"""A request for SQLite to allocate a zero-filled blob."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Reservation"]


@dataclass(frozen=True, order=True)
class Reservation:
    """A zero-filled ``BLOB`` of ``size`` bytes, for use as a statement parameter.

    A negative size reserves an empty blob.
    """

    size: int

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int):
            raise TypeError(f"reservation size must be an int, not {type(self.size).__name__}")

    def __len__(self) -> int:
        return max(self.size, 0)