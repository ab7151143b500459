"""Features detected from compile-time flags and the library version."""

from __future__ import annotations

from typing import ClassVar

from ..probe import Flag, Probe
from ..version import Version
from .keys import FeatureKey

__all__ = [
    "ApiArmor",
    "Attach",
    "AuthorizationCallback",
    "AutomaticInitialize",
    "AutomaticReset",
    "BlobIo",
    "BlobLike",
    "Complete",
    "Deprecated",
    "ErrorOffset",
    "Feature",
    "Fts3",
    "Fts5",
    "GetTable",
    "LoadExtension",
    "MemoryManagement",
    "PreUpdateHook",
    "ProgressCallback",
    "Session",
    "SharedCache",
    "TemporaryDatabase",
    "Trace",
]


class Feature:
    """A SQLite feature whose support can be probed.

    A feature present only when a flag is set names it in ``enabled_by``;
    a feature present unless a flag is set names it in ``omitted_by``.
    """

    key: ClassVar[FeatureKey]
    enabled_by: ClassVar[Flag | None] = None
    omitted_by: ClassVar[Flag | None] = None

    def is_supported(self, probe: Probe) -> bool:
        """True if the probed library supports this feature."""
        if self.enabled_by is not None and not probe.is_set(self.enabled_by):
            return False
        if self.omitted_by is not None and probe.is_set(self.omitted_by):
            return False
        return True

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ApiArmor(Feature):
    """Extra defensive checks in the SQLite API."""

    key = FeatureKey.API_ARMOR
    enabled_by = Flag.ENABLE_API_ARMOR


class GetTable(Feature):
    """The ``sqlite3_get_table()`` convenience API."""

    key = FeatureKey.GET_TABLE
    omitted_by = Flag.OMIT_GET_TABLE


class Complete(Feature):
    """The ``sqlite3_complete()`` API for checking statement completeness."""

    key = FeatureKey.COMPLETE
    omitted_by = Flag.OMIT_COMPLETE


class Deprecated(Feature):
    """Deprecated APIs."""

    key = FeatureKey.DEPRECATED
    omitted_by = Flag.OMIT_DEPRECATED


class Trace(Feature):
    """Tracing and profiling APIs."""

    key = FeatureKey.TRACE
    omitted_by = Flag.OMIT_TRACE


class AutomaticInitialize(Feature):
    """Automatic initialization via ``sqlite3_initialize()``."""

    key = FeatureKey.AUTOMATIC_INITIALIZE
    omitted_by = Flag.OMIT_AUTOMATIC_INITIALIZE


class AutomaticReset(Feature):
    """Automatic reset of prepared statements."""

    key = FeatureKey.AUTOMATIC_RESET
    omitted_by = Flag.OMIT_AUTOMATIC_RESET


class MemoryManagement(Feature):
    """Enhanced memory management APIs."""

    key = FeatureKey.MEMORY_MANAGEMENT
    enabled_by = Flag.ENABLE_MEMORY_MANAGEMENT


class ErrorOffset(Feature):
    """``sqlite3_error_offset()``, the byte offset of an error in SQL."""

    key = FeatureKey.ERROR_OFFSET
    AVAILABLE: ClassVar[Version] = Version.release(3, 38)

    def is_supported(self, probe: Probe) -> bool:
        return probe.version() >= self.AVAILABLE


class BlobIo(Feature):
    """BLOB literals such as ``X'0123'``."""

    key = FeatureKey.BLOB_IO
    omitted_by = Flag.OMIT_BLOB_IO


class BlobLike(Feature):
    """LIKE optimization on BLOB columns."""

    key = FeatureKey.BLOB_LIKE
    omitted_by = Flag.OMIT_BLOB_LIKE


class Attach(Feature):
    """The ``ATTACH DATABASE`` statement."""

    key = FeatureKey.ATTACH
    omitted_by = Flag.OMIT_ATTACH


class TemporaryDatabase(Feature):
    """Temporary databases."""

    key = FeatureKey.TEMPORARY_DATABASE
    omitted_by = Flag.OMIT_TEMPORARY_DATABASE


class SharedCache(Feature):
    """Shared cache mode."""

    key = FeatureKey.SHARED_CACHE
    omitted_by = Flag.OMIT_SHARED_CACHE


class LoadExtension(Feature):
    """Runtime loadable extensions."""

    key = FeatureKey.LOAD_EXTENSION
    omitted_by = Flag.OMIT_LOAD_EXTENSION


class Session(Feature):
    """The session extension for tracking and applying changes."""

    key = FeatureKey.SESSION
    enabled_by = Flag.ENABLE_SESSION


class Fts3(Feature):
    """FTS3 and FTS4 full-text search."""

    key = FeatureKey.FTS3
    enabled_by = Flag.ENABLE_FTS3


class Fts5(Feature):
    """FTS5 full-text search."""

    key = FeatureKey.FTS5
    enabled_by = Flag.ENABLE_FTS5


class PreUpdateHook(Feature):
    """Pre-update hooks."""

    key = FeatureKey.PRE_UPDATE_HOOK
    enabled_by = Flag.ENABLE_PRE_UPDATE_HOOK


class ProgressCallback(Feature):
    """Progress handler callbacks."""

    key = FeatureKey.PROGRESS_CALLBACK
    enabled_by = Flag.ENABLE_PROGRESS_CALLBACK


class AuthorizationCallback(Feature):
    """The authorizer callback."""

    key = FeatureKey.AUTHORIZATION_CALLBACK
    omitted_by = Flag.OMIT_AUTHORIZATION