"""Looking up features by key and probing for the supported ones."""

from __future__ import annotations

from collections.abc import Iterator

from ..probe import Probe
from . import content, interface
from .interface import Feature
from .keys import FeatureKey

__all__ = ["feature_for", "is_supported", "supported"]

_FEATURES: dict[FeatureKey, Feature] = {
    feature.key: feature
    for feature in (
        interface.ApiArmor(),
        interface.Attach(),
        interface.AuthorizationCallback(),
        interface.AutomaticInitialize(),
        interface.AutomaticReset(),
        interface.BlobIo(),
        interface.BlobLike(),
        content.CaseSensitiveLike(),
        content.ColumnDeclaredType(),
        content.ColumnMetadata(),
        interface.Complete(),
        interface.Deprecated(),
        interface.ErrorOffset(),
        interface.Fts3(),
        interface.Fts5(),
        interface.GetTable(),
        content.Json(),
        content.Jsonb(),
        interface.LoadExtension(),
        content.MemoryDatabases(),
        interface.MemoryManagement(),
        content.NormalizeSql(),
        interface.PreUpdateHook(),
        content.PrepareQuiet(),
        interface.ProgressCallback(),
        content.Serialize(),
        interface.Session(),
        interface.SharedCache(),
        content.Snapshot(),
        content.Soundex(),
        content.Stat4(),
        content.TclVariables(),
        interface.TemporaryDatabase(),
        interface.Trace(),
        content.Utf16(),
    )
}


def feature_for(key: FeatureKey) -> Feature:
    """The feature detector identified by ``key``."""
    return _FEATURES[key]


def is_supported(key: FeatureKey, probe: Probe) -> bool:
    """True if the probed library supports the feature identified by ``key``."""
    return feature_for(key).is_supported(probe)


def supported(probe: Probe) -> Iterator[FeatureKey]:
    """Yield the keys of every feature the probed library supports, in key order."""
    return (key for key in FeatureKey.all() if is_supported(key, probe))