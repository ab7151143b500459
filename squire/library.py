"""A fully probed SQLite library and its build metadata."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .features.keys import FeatureKey, UnknownFeature
from .features.registry import supported
from .probe import Probe, Threading, UnknownThreadingMode
from .version import ParseVersionError, Version

__all__ = ["Library", "MetadataError"]

VERSION_VARIABLE = "DEP_SQLITE3_VERSION"
THREADING_VARIABLE = "DEP_SQLITE3_THREADING"
FEATURES_VARIABLE = "DEP_SQLITE3_FEATURES"

_MESSAGES = {
    "missing_version": f"missing {VERSION_VARIABLE}",
    "invalid_version": "invalid version format",
    "missing_threading": f"missing {THREADING_VARIABLE}",
    "invalid_threading": "invalid threading mode",
    "missing_features": f"missing {FEATURES_VARIABLE}",
    "invalid_feature": "invalid feature key",
}


class MetadataError(ValueError):
    """Raised when library metadata is missing or malformed.

    ``kind`` is one of ``missing_version``, ``invalid_version``,
    ``missing_threading``, ``invalid_threading``, ``missing_features``
    and ``invalid_feature``.
    """

    def __init__(self, kind: str) -> None:
        super().__init__(_MESSAGES[kind])
        self.kind = kind


@dataclass(frozen=True)
class Library:
    """A SQLite library with a known version, threading mode and feature set."""

    version: Version
    threading: Threading
    features: frozenset[FeatureKey] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "features", frozenset(self.features))

    @classmethod
    def probe(cls, probe: Probe) -> Library:
        """Build a library description by probing a SQLite library."""
        return cls(probe.version(), probe.threading(), frozenset(supported(probe)))

    def is_supported(self, key: FeatureKey) -> bool:
        """True if the feature identified by ``key`` is supported."""
        return key in self.features

    def _sorted_features(self) -> list[FeatureKey]:
        return sorted(self.features)

    def to_metadata(self) -> dict[str, str]:
        """The library described as ``DEP_SQLITE3_*`` variables."""
        return {
            VERSION_VARIABLE: str(self.version),
            THREADING_VARIABLE: self.threading.as_str(),
            FEATURES_VARIABLE: ",".join(key.as_str() for key in self._sorted_features()),
        }

    @classmethod
    def from_metadata(cls, environ: Mapping[str, str] | None = None) -> Library:
        """Read a library description from ``DEP_SQLITE3_*`` variables.

        Reads the process environment when ``environ`` is not given.
        """
        if environ is None:
            environ = os.environ

        text = environ.get(VERSION_VARIABLE)
        if text is None:
            raise MetadataError("missing_version")
        try:
            version = Version.parse(text)
        except ParseVersionError:
            raise MetadataError("invalid_version") from None

        text = environ.get(THREADING_VARIABLE)
        if text is None:
            raise MetadataError("missing_threading")
        try:
            threading = Threading.parse(text)
        except UnknownThreadingMode:
            raise MetadataError("invalid_threading") from None

        text = environ.get(FEATURES_VARIABLE)
        if text is None:
            raise MetadataError("missing_features")
        try:
            features = _parse_features(text.split(",")) if text else frozenset()
        except UnknownFeature:
            raise MetadataError("invalid_feature") from None

        return cls(version, threading, features)

    def cfg_names(self) -> list[str]:
        """Configuration names for the supported features, e.g. ``sqlite_has_json``."""
        return [f"sqlite_has_{key.as_str()}" for key in self._sorted_features()]


def _parse_features(names: Iterable[str]) -> frozenset[FeatureKey]:
    return frozenset(FeatureKey.parse(name) for name in names)