import pytest

from squire.features.content import (
    CaseSensitiveLike,
    ColumnDeclaredType,
    ColumnMetadata,
    Json,
    Jsonb,
    MemoryDatabases,
    NormalizeSql,
    PrepareQuiet,
    Serialize,
    Snapshot,
    Soundex,
    Stat4,
    TclVariables,
    Utf16,
)
from squire.features.keys import FeatureKey
from squire.probe import Flag, StaticProbe
from squire.version import Version

MODERN = Version(3, 50, 4)
OLD = Version(3, 37, 0)


def test_json_before_default_requires_enable_flag():
    assert Json().is_supported(StaticProbe(OLD, [Flag.ENABLE_JSON])) is True
    assert Json().is_supported(StaticProbe(OLD)) is False


def test_json_after_default_unless_omitted():
    assert Json().is_supported(StaticProbe(Json.ENABLED_BY_DEFAULT)) is True
    assert Json().is_supported(StaticProbe(MODERN, [Flag.OMIT_JSON])) is False


def test_json_after_default_ignores_enable_flag():
    probe = StaticProbe(MODERN, [Flag.ENABLE_JSON, Flag.OMIT_JSON])
    assert Json().is_supported(probe) is False


def test_jsonb_requires_version_and_json():
    assert Jsonb().is_supported(StaticProbe(Version(3, 44, 0))) is False
    assert Jsonb().is_supported(StaticProbe(Jsonb.AVAILABLE)) is True
    assert Jsonb().is_supported(StaticProbe(Jsonb.AVAILABLE, [Flag.OMIT_JSON])) is False


def test_prepare_quiet_version_threshold():
    assert PrepareQuiet.AVAILABLE == Version.release(3, 48)
    assert PrepareQuiet().is_supported(StaticProbe(Version(3, 47, 2))) is False
    assert PrepareQuiet().is_supported(StaticProbe(Version(3, 48, 0))) is True


@pytest.mark.parametrize(
    "feature, flag",
    [
        (ColumnMetadata(), Flag.ENABLE_COLUMN_METADATA),
        (NormalizeSql(), Flag.ENABLE_NORMALIZE_SQL),
        (Stat4(), Flag.ENABLE_STAT4),
        (Snapshot(), Flag.ENABLE_SNAPSHOT),
        (CaseSensitiveLike(), Flag.ENABLE_CASE_SENSITIVE_LIKE),
        (Soundex(), Flag.ENABLE_SOUNDEX),
    ],
)
def test_enabled_features(feature, flag):
    assert feature.is_supported(StaticProbe(MODERN)) is False
    assert feature.is_supported(StaticProbe(MODERN, [flag])) is True


@pytest.mark.parametrize(
    "feature, flag",
    [
        (ColumnDeclaredType(), Flag.OMIT_COLUMN_DECLARED_TYPE),
        (TclVariables(), Flag.OMIT_TCL_VARIABLES),
        (Serialize(), Flag.OMIT_SERIALIZE),
        (MemoryDatabases(), Flag.OMIT_MEMORY_DATABASES),
        (Utf16(), Flag.OMIT_UTF16),
    ],
)
def test_omitted_features(feature, flag):
    assert feature.is_supported(StaticProbe(MODERN)) is True
    assert feature.is_supported(StaticProbe(MODERN, [flag])) is False


@pytest.mark.parametrize(
    "feature, key",
    [
        (Json(), FeatureKey.JSON),
        (Jsonb(), FeatureKey.JSONB),
        (PrepareQuiet(), FeatureKey.PREPARE_QUIET),
        (Utf16(), FeatureKey.UTF16),
        (Soundex(), FeatureKey.SOUNDEX),
    ],
)
def test_keys(feature, key):
    assert feature.key is key