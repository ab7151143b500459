"""Keys identifying each detectable SQLite feature."""

from __future__ import annotations

from enum import Enum

__all__ = ["FeatureKey", "UnknownFeature"]


class UnknownFeature(ValueError):
    """Raised when a string does not name a known feature key."""

    def __init__(self, text: str = "") -> None:
        super().__init__("unknown feature key")
        self.input = text


class FeatureKey(Enum):
    """Identifies each detectable SQLite feature.

    Keys are ordered by their declaration order.
    """

    API_ARMOR = "api_armor"
    ATTACH = "attach"
    AUTHORIZATION_CALLBACK = "authorization_callback"
    AUTOMATIC_INITIALIZE = "automatic_initialize"
    AUTOMATIC_RESET = "automatic_reset"
    BLOB_IO = "blob_io"
    BLOB_LIKE = "blob_like"
    CASE_SENSITIVE_LIKE = "case_sensitive_like"
    COLUMN_DECLARED_TYPE = "column_declared_type"
    COLUMN_METADATA = "column_metadata"
    COMPLETE = "complete"
    DEPRECATED = "deprecated"
    ERROR_OFFSET = "error_offset"
    FTS3 = "fts3"
    FTS5 = "fts5"
    GET_TABLE = "get_table"
    JSON = "json"
    JSONB = "jsonb"
    LOAD_EXTENSION = "load_extension"
    MEMORY_DATABASES = "memory_databases"
    MEMORY_MANAGEMENT = "memory_management"
    NORMALIZE_SQL = "normalize_sql"
    PRE_UPDATE_HOOK = "pre_update_hook"
    PREPARE_QUIET = "prepare_quiet"
    PROGRESS_CALLBACK = "progress_callback"
    SERIALIZE = "serialize"
    SESSION = "session"
    SHARED_CACHE = "shared_cache"
    SNAPSHOT = "snapshot"
    SOUNDEX = "soundex"
    STAT4 = "stat4"
    TCL_VARIABLES = "tcl_variables"
    TEMPORARY_DATABASE = "temporary_database"
    TRACE = "trace"
    UTF16 = "utf16"

    def as_str(self) -> str:
        """The ``snake_case`` name of this key, e.g. ``load_extension``."""
        return self.value

    @classmethod
    def parse(cls, text: str) -> FeatureKey:
        """Parse a ``snake_case`` key name; raise :class:`UnknownFeature` otherwise."""
        try:
            return cls(text)
        except ValueError:
            raise UnknownFeature(text) from None

    @classmethod
    def all(cls) -> tuple[FeatureKey, ...]:
        """Every feature key, in order."""
        return tuple(cls)

    def _position(self) -> int:
        return _ORDER[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FeatureKey):
            return NotImplemented
        return self._position() < other._position()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FeatureKey):
            return NotImplemented
        return self._position() <= other._position()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FeatureKey):
            return NotImplemented
        return self._position() > other._position()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FeatureKey):
            return NotImplemented
        return self._position() >= other._position()

    def __str__(self) -> str:
        return self.value


_ORDER = {key: position for position, key in enumerate(FeatureKey)}