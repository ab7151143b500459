"""Probing a SQLite library for its version, compile-time options and threading."""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from collections.abc import Iterable
from contextlib import closing
from enum import Enum

from .version import Version

__all__ = [
    "Flag",
    "ParseFlagError",
    "Probe",
    "StaticProbe",
    "SystemProbe",
    "Threading",
    "UnknownThreadingMode",
]

_PREFIX = "SQLITE_"


class ParseFlagError(ValueError):
    """Raised when a string does not name a known compile-time flag."""

    def __init__(self, text: str) -> None:
        super().__init__(f"unknown SQLite flag: {text}")
        self.input = text


class Flag(Enum):
    """A compile-time option which enables or omits a SQLite feature."""

    ENABLE_API_ARMOR = "SQLITE_ENABLE_API_ARMOR"
    ENABLE_CASE_SENSITIVE_LIKE = "SQLITE_CASE_SENSITIVE_LIKE"
    ENABLE_COLUMN_METADATA = "SQLITE_ENABLE_COLUMN_METADATA"
    ENABLE_FTS3 = "SQLITE_ENABLE_FTS3"
    ENABLE_FTS5 = "SQLITE_ENABLE_FTS5"
    ENABLE_JSON = "SQLITE_ENABLE_JSON1"
    ENABLE_MEMORY_MANAGEMENT = "SQLITE_ENABLE_MEMORY_MANAGEMENT"
    ENABLE_NORMALIZE_SQL = "SQLITE_ENABLE_NORMALIZE"
    ENABLE_PRE_UPDATE_HOOK = "SQLITE_ENABLE_PREUPDATE_HOOK"
    ENABLE_PROGRESS_CALLBACK = "SQLITE_ENABLE_PROGRESS_CALLBACK"
    ENABLE_SESSION = "SQLITE_ENABLE_SESSION"
    ENABLE_SNAPSHOT = "SQLITE_ENABLE_SNAPSHOT"
    ENABLE_SOUNDEX = "SQLITE_SOUNDEX"
    ENABLE_STAT4 = "SQLITE_ENABLE_STAT4"
    OMIT_ATTACH = "SQLITE_OMIT_ATTACH"
    OMIT_AUTHORIZATION = "SQLITE_OMIT_AUTHORIZATION"
    OMIT_AUTOMATIC_INITIALIZE = "SQLITE_OMIT_AUTOINIT"
    OMIT_AUTOMATIC_RESET = "SQLITE_OMIT_AUTORESET"
    OMIT_BLOB_IO = "SQLITE_OMIT_BLOB_LITERAL"
    OMIT_BLOB_LIKE = "SQLITE_OMIT_LIKE_OPTIMIZATION"
    OMIT_COLUMN_DECLARED_TYPE = "SQLITE_OMIT_DECLTYPE"
    OMIT_COMPLETE = "SQLITE_OMIT_COMPLETE"
    OMIT_DEPRECATED = "SQLITE_OMIT_DEPRECATED"
    OMIT_GET_TABLE = "SQLITE_OMIT_GET_TABLE"
    OMIT_JSON = "SQLITE_OMIT_JSON"
    OMIT_LOAD_EXTENSION = "SQLITE_OMIT_LOAD_EXTENSION"
    OMIT_MEMORY_DATABASES = "SQLITE_OMIT_MEMORYDB"
    OMIT_SERIALIZE = "SQLITE_OMIT_DESERIALIZE"
    OMIT_SHARED_CACHE = "SQLITE_OMIT_SHARED_CACHE"
    OMIT_TCL_VARIABLES = "SQLITE_OMIT_TCL_VARIABLE"
    OMIT_TEMPORARY_DATABASE = "SQLITE_OMIT_TEMPDB"
    OMIT_TRACE = "SQLITE_OMIT_TRACE"
    OMIT_UTF16 = "SQLITE_OMIT_UTF16"

    def option_name(self) -> str:
        """The full name of the compile-time option, e.g. ``SQLITE_ENABLE_JSON1``."""
        return self.value

    def base_name(self) -> str:
        """The option name without its ``SQLITE_`` prefix."""
        return self.value[len(_PREFIX):]

    @classmethod
    def of(cls, text: str) -> Flag | None:
        """Look up a flag by name, with or without the ``SQLITE_`` prefix."""
        normalized = text[len(_PREFIX):] if text.startswith(_PREFIX) else text
        return _FLAGS_BY_BASE_NAME.get(normalized)

    @classmethod
    def parse(cls, text: str) -> Flag:
        """Like :meth:`of`, but raise :class:`ParseFlagError` for unknown names."""
        flag = cls.of(text)
        if flag is None:
            raise ParseFlagError(text)
        return flag

    def __str__(self) -> str:
        return self.value


_FLAGS_BY_BASE_NAME = {flag.base_name(): flag for flag in Flag}


class UnknownThreadingMode(ValueError):
    """Raised when a string does not name a threading mode."""

    def __init__(self, text: str = "") -> None:
        super().__init__("unknown threading mode")
        self.input = text


class Threading(Enum):
    """The threading mode that SQLite was built with."""

    SINGLE_THREAD = 0
    MULTI_THREAD = 1
    SERIALIZED = 2

    def is_single_threaded(self) -> bool:
        """True if the library was built without thread safety."""
        return self is Threading.SINGLE_THREAD

    def is_thread_safe(self) -> bool:
        """True if the library was built with thread safety."""
        return self in (Threading.MULTI_THREAD, Threading.SERIALIZED)

    def as_str(self) -> str:
        """The mode's name as used in build feature names."""
        return _THREADING_NAMES[self]

    @classmethod
    def parse(cls, text: str) -> Threading:
        """Parse a mode name; raise :class:`UnknownThreadingMode` otherwise."""
        for mode, name in _THREADING_NAMES.items():
            if name == text:
                return mode
        raise UnknownThreadingMode(text)

    def __str__(self) -> str:
        return self.as_str()


_THREADING_NAMES = {
    Threading.SINGLE_THREAD: "single-thread",
    Threading.MULTI_THREAD: "multi-thread",
    Threading.SERIALIZED: "serialized",
}

# Values reported by sqlite3_threadsafe() / the THREADSAFE compile option.
_THREADSAFE_VALUES = {
    0: Threading.SINGLE_THREAD,
    1: Threading.SERIALIZED,
    2: Threading.MULTI_THREAD,
}


class Probe(ABC):
    """A SQLite library whose version and features are being probed."""

    @abstractmethod
    def version(self) -> Version:
        """The version of the SQLite library."""

    @abstractmethod
    def is_set(self, flag: Flag) -> bool:
        """Whether the given compile-time option was set."""

    @abstractmethod
    def threading(self) -> Threading:
        """The thread safety of the library."""


class StaticProbe(Probe):
    """A probe answering from a fixed version, set of flags and threading mode."""

    def __init__(
        self,
        version: Version,
        flags: Iterable[Flag] = (),
        threading: Threading = Threading.SERIALIZED,
    ) -> None:
        self._version = version
        self._flags = frozenset(flags)
        self._threading = threading

    def version(self) -> Version:
        return self._version

    def is_set(self, flag: Flag) -> bool:
        return flag in self._flags

    def threading(self) -> Threading:
        return self._threading

    def __repr__(self) -> str:
        flags = sorted(flag.value for flag in self._flags)
        return f"StaticProbe({self._version!s}, flags={flags}, threading={self._threading})"


class SystemProbe(Probe):
    """A probe of the SQLite library that the ``sqlite3`` module is linked to."""

    def __init__(self, connection: sqlite3.Connection | None = None) -> None:
        if connection is None:
            with closing(sqlite3.connect(":memory:")) as own:
                self._load(own)
        else:
            self._load(connection)

    def _load(self, connection: sqlite3.Connection) -> None:
        (text,) = connection.execute("SELECT sqlite_version()").fetchone()
        self._version = Version.parse(text)
        options: dict[str, str | None] = {}
        for (option,) in connection.execute("PRAGMA compile_options"):
            name, sep, value = option.partition("=")
            options[name.upper()] = value if sep else None
        self._options = options

    def version(self) -> Version:
        return self._version

    def is_set(self, flag: Flag) -> bool:
        return flag.base_name() in self._options

    def threading(self) -> Threading:
        value = self._options.get("THREADSAFE")
        try:
            number = int(value) if value is not None else None
        except ValueError:
            number = None
        return _THREADSAFE_VALUES.get(number, Threading.SINGLE_THREAD)