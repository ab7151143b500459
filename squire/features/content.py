"""Features of SQL text, JSON, storage, statistics and column metadata."""

from __future__ import annotations

from typing import ClassVar

from ..probe import Flag, Probe
from ..version import Version
from .interface import Feature
from .keys import FeatureKey

__all__ = [
    "CaseSensitiveLike",
    "ColumnDeclaredType",
    "ColumnMetadata",
    "Json",
    "Jsonb",
    "MemoryDatabases",
    "NormalizeSql",
    "PrepareQuiet",
    "Serialize",
    "Snapshot",
    "Soundex",
    "Stat4",
    "TclVariables",
    "Utf16",
]


class Json(Feature):
    """JSON functions and operators.

    Before 3.38 JSON had to be enabled at compile time; since then it is
    present unless omitted.
    """

    key = FeatureKey.JSON
    ENABLED_BY_DEFAULT: ClassVar[Version] = Version.release(3, 38)

    def is_supported(self, probe: Probe) -> bool:
        if probe.version() < self.ENABLED_BY_DEFAULT:
            return probe.is_set(Flag.ENABLE_JSON)
        return not probe.is_set(Flag.OMIT_JSON)


class Jsonb(Feature):
    """The binary JSON encoding."""

    key = FeatureKey.JSONB
    AVAILABLE: ClassVar[Version] = Version.release(3, 45)

    def is_supported(self, probe: Probe) -> bool:
        return Json().is_supported(probe) and probe.version() >= self.AVAILABLE


class ColumnMetadata(Feature):
    """Column metadata APIs such as ``sqlite3_column_database_name()``."""

    key = FeatureKey.COLUMN_METADATA
    enabled_by = Flag.ENABLE_COLUMN_METADATA


class ColumnDeclaredType(Feature):
    """The ``sqlite3_column_decltype()`` API."""

    key = FeatureKey.COLUMN_DECLARED_TYPE
    omitted_by = Flag.OMIT_COLUMN_DECLARED_TYPE


class NormalizeSql(Feature):
    """SQL normalization via ``sqlite3_normalized_sql()``."""

    key = FeatureKey.NORMALIZE_SQL
    enabled_by = Flag.ENABLE_NORMALIZE_SQL


class PrepareQuiet(Feature):
    """Silencing error logging from ``prepare``."""

    key = FeatureKey.PREPARE_QUIET
    AVAILABLE: ClassVar[Version] = Version.release(3, 48)

    def is_supported(self, probe: Probe) -> bool:
        return probe.version() >= self.AVAILABLE


class TclVariables(Feature):
    """TCL variable substitution in SQL."""

    key = FeatureKey.TCL_VARIABLES
    omitted_by = Flag.OMIT_TCL_VARIABLES


class Stat4(Feature):
    """Enhanced query planner statistics via STAT4 tables."""

    key = FeatureKey.STAT4
    enabled_by = Flag.ENABLE_STAT4


class Snapshot(Feature):
    """Database snapshots."""

    key = FeatureKey.SNAPSHOT
    enabled_by = Flag.ENABLE_SNAPSHOT


class Serialize(Feature):
    """Database serialization via ``sqlite3_serialize()`` and ``sqlite3_deserialize()``."""

    key = FeatureKey.SERIALIZE
    omitted_by = Flag.OMIT_SERIALIZE


class MemoryDatabases(Feature):
    """In-memory databases."""

    key = FeatureKey.MEMORY_DATABASES
    omitted_by = Flag.OMIT_MEMORY_DATABASES


class CaseSensitiveLike(Feature):
    """A case-sensitive LIKE operator."""

    key = FeatureKey.CASE_SENSITIVE_LIKE
    enabled_by = Flag.ENABLE_CASE_SENSITIVE_LIKE


class Soundex(Feature):
    """The ``SOUNDEX()`` SQL function."""

    key = FeatureKey.SOUNDEX
    enabled_by = Flag.ENABLE_SOUNDEX


class Utf16(Feature):
    """Functions which accept or return UTF-16 text."""

    key = FeatureKey.UTF16
    omitted_by = Flag.OMIT_UTF16