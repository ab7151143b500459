import dataclasses
import os
from pathlib import Path

import pytest

from squire.database import (
    SQLITE_OPEN_MEMORY,
    SQLITE_OPEN_URI,
    Database,
    EndpointKind,
    to_location,
)


def test_memory_has_empty_location():
    database = Database.memory()
    assert database.kind is EndpointKind.MEMORY
    assert database.location() == ""


def test_memory_flags_match_documented_constant():
    assert Database.memory().flags() == 0x80
    assert Database.memory().flags() == SQLITE_OPEN_MEMORY


def test_uri_flags_match_documented_constant():
    assert Database.uri("file:data.db").flags() == 0x40
    assert Database.uri("file:data.db").flags() == SQLITE_OPEN_URI


def test_path_needs_no_flags():
    assert Database.path("data.db").flags() == 0


def test_path_from_string_keeps_location():
    database = Database.path("some/dir/data.db")
    assert database.kind is EndpointKind.PATH
    assert database.location() == "some/dir/data.db"


def test_path_from_pathlike():
    path = Path("some") / "data.db"
    assert Database.path(path).location() == os.fspath(path)


def test_path_from_bytes():
    assert Database.path(b"data.db").location() == os.fsdecode(b"data.db")


def test_uri_keeps_location():
    database = Database.uri("file:data.db?mode=ro")
    assert database.kind is EndpointKind.URI
    assert database.location() == "file:data.db?mode=ro"


def test_named_memory():
    database = Database.memory().named("shared")
    assert database.kind is EndpointKind.MEMORY
    assert database.location() == "shared"
    assert database.flags() == SQLITE_OPEN_MEMORY


def test_only_memory_can_be_named():
    with pytest.raises(ValueError):
        Database.path("data.db").named("other")


@pytest.mark.parametrize(
    "make",
    [Database.path, Database.uri, lambda name: Database.memory().named(name)],
)
def test_nul_in_location_is_rejected(make):
    with pytest.raises(ValueError):
        make("bad\0name")


def test_to_location_rejects_other_types():
    with pytest.raises(TypeError):
        to_location(123)


def test_to_location_round_trips_string():
    assert to_location("file:x.db") == "file:x.db"


def test_equality_depends_on_kind_and_location():
    assert Database.path("a.db") == Database.path("a.db")
    assert Database.path("a.db") != Database.uri("a.db")
    assert Database.path("a.db") != Database.path("b.db")


def test_database_is_immutable():
    database = Database.path("a.db")
    with pytest.raises(dataclasses.FrozenInstanceError):
        database.name = "b.db"
    assert database.location() == "a.db"
    assert database.kind is EndpointKind.PATH


def test_path_kind_requires_location():
    with pytest.raises(ValueError):
        Database(EndpointKind.PATH)