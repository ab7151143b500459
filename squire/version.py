"""SQLite library version numbers."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["ParseVersionError", "Version"]

_MAJOR_MAGNITUDE = 1_000_000
_MINOR_MAGNITUDE = 1_000
_PART = re.compile(r"\+?[0-9]+")


class ParseVersionError(ValueError):
    """Raised when a string is not a valid ``major.minor.patch`` version."""

    def __init__(self, message: str = "invalid SQLite version") -> None:
        super().__init__(message)


@dataclass(frozen=True, order=True)
class Version:
    """A version of the SQLite library, ordered by major, minor and patch."""

    major: int
    minor: int
    patch: int

    @classmethod
    def release(cls, major: int, minor: int) -> Version:
        """Create the version ``major.minor.0``."""
        return cls(major, minor, 0)

    @classmethod
    def from_number(cls, num: int) -> Version:
        """Create a version from an ``SQLITE_VERSION_NUMBER`` style integer."""
        if num < 0:
            raise ValueError(f"version number must not be negative: {num}")
        major, rest = divmod(num, _MAJOR_MAGNITUDE)
        minor, patch = divmod(rest, _MINOR_MAGNITUDE)
        return cls(major, minor, patch)

    @classmethod
    def from_parts(cls, parts: Sequence[int]) -> Version:
        """Create a version from a three-element tuple or list."""
        major, minor, patch = parts
        return cls(int(major), int(minor), int(patch))

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``major.minor.patch``; raise :class:`ParseVersionError` otherwise."""
        pieces = text.split(".")
        if len(pieces) != 3 or not all(_PART.fullmatch(piece) for piece in pieces):
            raise ParseVersionError()
        major, minor, patch = (int(piece) for piece in pieces)
        return cls(major, minor, patch)

    def to_number(self) -> int:
        """The ``SQLITE_VERSION_NUMBER`` style integer for this version."""
        return self.major * _MAJOR_MAGNITUDE + self.minor * _MINOR_MAGNITUDE + self.patch

    def as_tuple(self) -> tuple[int, int, int]:
        """The version as a ``(major, minor, patch)`` tuple."""
        return (self.major, self.minor, self.patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"