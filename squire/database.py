"""Where a connection's database lives: a file path, a URI or memory."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

__all__ = [
    "SQLITE_OPEN_CREATE",
    "SQLITE_OPEN_FULLMUTEX",
    "SQLITE_OPEN_MEMORY",
    "SQLITE_OPEN_NOFOLLOW",
    "SQLITE_OPEN_NOMUTEX",
    "SQLITE_OPEN_READONLY",
    "SQLITE_OPEN_READWRITE",
    "SQLITE_OPEN_URI",
    "Database",
    "EndpointKind",
    "to_location",
]

SQLITE_OPEN_READONLY = 0x00000001
SQLITE_OPEN_READWRITE = 0x00000002
SQLITE_OPEN_CREATE = 0x00000004
SQLITE_OPEN_URI = 0x00000040
SQLITE_OPEN_MEMORY = 0x00000080
SQLITE_OPEN_NOMUTEX = 0x00008000
SQLITE_OPEN_FULLMUTEX = 0x00010000
SQLITE_OPEN_NOFOLLOW = 0x01000000


def to_location(value: str | bytes | os.PathLike) -> str:
    """Convert a string, bytes or path-like value into a database location.

    Raises :class:`ValueError` if the location holds a ``\\0`` character.
    """
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if isinstance(value, (bytes, bytearray)):
        value = os.fsdecode(bytes(value))
    if not isinstance(value, str):
        raise TypeError(f"cannot use {type(value).__name__} as a database location")
    if "\0" in value:
        raise ValueError("no \\0 bytes in connection string")
    return value


class EndpointKind(Enum):
    """How a database location is interpreted."""

    PATH = "path"
    URI = "uri"
    MEMORY = "memory"


_KIND_FLAGS = {
    EndpointKind.PATH: 0,
    EndpointKind.URI: SQLITE_OPEN_URI,
    EndpointKind.MEMORY: SQLITE_OPEN_MEMORY,
}


@dataclass(frozen=True)
class Database:
    """A database to connect to.

    ``name`` is the location; an unnamed in-memory database has none.
    """

    kind: EndpointKind
    name: str | None = None

    def __post_init__(self) -> None:
        if self.kind is not EndpointKind.MEMORY and self.name is None:
            raise ValueError(f"a {self.kind.value} database needs a location")

    @classmethod
    def memory(cls) -> Database:
        """A private, unnamed in-memory database."""
        return cls(EndpointKind.MEMORY)

    def named(self, name: str | bytes | os.PathLike) -> Database:
        """This in-memory database, given a name."""
        if self.kind is not EndpointKind.MEMORY:
            raise ValueError("only in-memory databases can be named")
        return Database(EndpointKind.MEMORY, to_location(name))

    @classmethod
    def path(cls, path: str | bytes | os.PathLike) -> Database:
        """A database stored in the file at ``path``."""
        return cls(EndpointKind.PATH, to_location(path))

    @classmethod
    def uri(cls, uri: str | bytes | os.PathLike) -> Database:
        """A database identified by a ``file:`` URI."""
        return cls(EndpointKind.URI, to_location(uri))

    def location(self) -> str:
        """The location string; empty for an unnamed in-memory database."""
        return self.name if self.name is not None else ""

    def flags(self) -> int:
        """The open flags this kind of location requires."""
        return _KIND_FLAGS[self.kind]