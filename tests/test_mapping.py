from dataclasses import dataclass
from dataclasses import fields as dc_fields
from typing import NamedTuple

import pytest

from squire.mapping import (
    BindingMode,
    FieldIdentity,
    MappingError,
    ResolvedField,
    field,
    resolve_fields,
)


@dataclass
class Plain:
    a: str
    b: int
    c: float


class Triple(NamedTuple):
    x: int
    y: int
    z: int


def test_binding_mode_flags_are_exclusive():
    with pytest.raises(MappingError):
        BindingMode.from_flags(True, True, True)


@pytest.mark.parametrize(
    "named, sequential, has_names, expected",
    [
        (False, True, True, BindingMode.SEQUENTIAL),
        (True, False, False, BindingMode.NAMED),
        (False, False, True, BindingMode.NAMED),
        (False, False, False, BindingMode.SEQUENTIAL),
    ],
)
def test_binding_mode_from_flags(named, sequential, has_names, expected):
    assert BindingMode.from_flags(named, sequential, has_names) is expected


def test_binding_mode_is_named():
    assert BindingMode.NAMED.is_named()
    assert not BindingMode.SEQUENTIAL.is_named()


def test_identity_explicit_index_wins():
    identity = FieldIdentity.from_field("a", 0, "other", 7, False, 1)
    assert identity == FieldIdentity(index=7)


def test_identity_rename_in_named_mode():
    assert FieldIdentity.from_field("a", 0, "other", None, False, 1).name == "other"


def test_identity_name_in_named_mode():
    assert FieldIdentity.from_field("a", 2, None, None, False, 0) == FieldIdentity(name="a")


def test_identity_sequential_uses_base():
    first_param = FieldIdentity.from_field("a", 0, None, None, True, 1)
    first_column = FieldIdentity.from_field("a", 0, None, None, True, 0)
    assert first_param.index == first_column.index + 1
    assert first_column.index == 0


def test_identity_without_name_falls_back_to_sequential():
    identity = FieldIdentity.from_field(None, 0, None, None, False, 0)
    assert identity.name is None and identity.index == 0


def test_identity_requires_exactly_one_part():
    with pytest.raises(ValueError):
        FieldIdentity()
    with pytest.raises(ValueError):
        FieldIdentity(name="a", index=1)


def test_resolve_dataclass_defaults_to_names():
    fields = resolve_fields(Plain)
    assert [item.identity.name for item in fields] == ["a", "b", "c"]
    assert [item.attribute for item in fields] == ["a", "b", "c"]


def test_resolve_sequential_dataclass():
    fields = resolve_fields(Plain, sequential=True, base=1)
    indexes = [item.identity.index for item in fields]
    assert indexes[0] == 1
    assert indexes == sorted(indexes)
    assert len(set(indexes)) == len(indexes)


def test_resolve_named_tuple_defaults_to_sequential():
    fields = resolve_fields(Triple, base=0)
    assert [item.identity.index for item in fields] == [0, 1, 2]
    assert all(item.identity.name is None for item in fields)


def test_resolve_named_tuple_explicitly_named():
    fields = resolve_fields(Triple, named=True)
    assert [item.identity.name for item in fields] == ["x", "y", "z"]


def test_skipped_fields_take_no_position():
    @dataclass
    class WithSkip:
        a: int
        hidden: int = field(skip=True, default=0)
        b: int = 0

    fields = resolve_fields(WithSkip, sequential=True, base=0)
    assert [item.attribute for item in fields] == ["a", "b"]
    assert [item.identity.index for item in fields] == [0, 1]


def test_rename_and_convert_are_carried():
    @dataclass
    class Renamed:
        a: str = field(rename="label", convert=str.upper)

    (resolved,) = resolve_fields(Renamed)
    assert resolved == ResolvedField("a", FieldIdentity(name="label"), str.upper)


def test_rename_ignored_in_sequential_mode():
    @dataclass
    class Renamed:
        a: str = field(rename="label")

    (resolved,) = resolve_fields(Renamed, sequential=True, base=1)
    assert resolved.identity == FieldIdentity(index=1)


def test_explicit_index_in_named_mode_is_rejected():
    @dataclass
    class Mixed:
        a: int = field(index=1)
        b: int = 0

    with pytest.raises(MappingError, match="not all fields have names"):
        resolve_fields(Mixed, base=1)


def test_duplicate_names_are_rejected():
    @dataclass
    class Clash:
        a: int = field(rename="b")
        b: int = 0

    with pytest.raises(MappingError):
        resolve_fields(Clash)


def test_index_below_base_is_rejected():
    @dataclass
    class Zero:
        a: int = field(index=0)

    with pytest.raises(MappingError):
        resolve_fields(Zero, sequential=True, base=1)


def test_unsupported_shapes_are_rejected():
    class Unit:
        pass

    with pytest.raises(MappingError):
        resolve_fields(Unit)
    with pytest.raises(MappingError):
        resolve_fields(Plain("a", 1, 1.0))


def test_field_keeps_dataclass_options():
    @dataclass
    class Defaults:
        a: int = field(index=2, default=5, metadata={"note": "kept"})

    assert Defaults().a == 5
    assert dc_fields(Defaults)[0].metadata["note"] == "kept"

    (resolved,) = resolve_fields(Defaults, sequential=True, base=0)
    assert resolved.attribute == "a"
    assert resolved.identity == FieldIdentity(index=2)


def test_field_rejects_bad_options():
    with pytest.raises(TypeError):
        field(index="1")
    with pytest.raises(TypeError):
        field(convert=42)