"""Mapping the fields of a record class onto statement parameters or result columns."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from enum import Enum
from typing import Any

__all__ = [
    "BindingMode",
    "FieldIdentity",
    "MappingError",
    "ResolvedField",
    "field",
    "resolve_fields",
]

_OPTIONS_KEY = "squire"


class MappingError(TypeError):
    """Raised when a record class cannot be mapped onto parameters or columns."""


@dataclasses.dataclass(frozen=True)
class _FieldOptions:
    skip: bool = False
    index: int | None = None
    rename: str | None = None
    convert: Callable[[Any], Any] | None = None


_DEFAULT_OPTIONS = _FieldOptions()


def field(
    *,
    skip: bool = False,
    index: int | None = None,
    rename: str | None = None,
    convert: Callable[[Any], Any] | None = None,
    **kwargs: Any,
) -> Any:
    """Declare a dataclass field with mapping options.

    ``skip`` leaves the field out, ``index`` pins it to a parameter or column
    index, ``rename`` maps it under another name and ``convert`` transforms
    its value. Other keyword arguments go to :func:`dataclasses.field`.
    """
    if index is not None and (isinstance(index, bool) or not isinstance(index, int)):
        raise TypeError(f"index must be an int, not {type(index).__name__}")
    if rename is not None and not isinstance(rename, str):
        raise TypeError(f"rename must be a str, not {type(rename).__name__}")
    if convert is not None and not callable(convert):
        raise TypeError("convert must be callable")
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[_OPTIONS_KEY] = _FieldOptions(skip, index, rename, convert)
    return dataclasses.field(metadata=metadata, **kwargs)


class BindingMode(Enum):
    """Whether fields are matched by name or by sequential index."""

    NAMED = "named"
    SEQUENTIAL = "sequential"

    @classmethod
    def from_flags(cls, named: bool, sequential: bool, has_names: bool) -> BindingMode:
        """Choose a mode from explicit flags, falling back on the record's shape."""
        if named and sequential:
            raise MappingError("named and sequential are mutually exclusive")
        if sequential:
            return cls.SEQUENTIAL
        if named or has_names:
            return cls.NAMED
        return cls.SEQUENTIAL

    def is_named(self) -> bool:
        """True if fields are matched by name."""
        return self is BindingMode.NAMED


@dataclasses.dataclass(frozen=True)
class FieldIdentity:
    """How a field is identified: by ``name`` or by sequential ``index``."""

    name: str | None = None
    index: int | None = None

    def __post_init__(self) -> None:
        if (self.name is None) == (self.index is None):
            raise ValueError("a field identity has exactly one of a name or an index")

    @classmethod
    def from_field(
        cls,
        name: str | None,
        position: int,
        rename: str | None,
        explicit_index: int | None,
        sequential: bool,
        base: int,
    ) -> FieldIdentity:
        """Determine a field's identity; an explicit index always wins."""
        if explicit_index is not None:
            return cls(index=explicit_index)
        if not sequential and rename is not None:
            return cls(name=rename)
        if not sequential and name is not None:
            return cls(name=name)
        return cls(index=base + position)


@dataclasses.dataclass(frozen=True)
class ResolvedField:
    """A record attribute together with its identity and optional converter."""

    attribute: str
    identity: FieldIdentity
    convert: Callable[[Any], Any] | None = None


def _entries(cls: type) -> tuple[list[tuple[str, _FieldOptions]], bool]:
    if dataclasses.is_dataclass(cls):
        entries = [
            (item.name, item.metadata.get(_OPTIONS_KEY, _DEFAULT_OPTIONS))
            for item in dataclasses.fields(cls)
        ]
        return entries, True
    if issubclass(cls, tuple) and hasattr(cls, "_fields"):
        return [(name, _DEFAULT_OPTIONS) for name in cls._fields], False
    raise MappingError(
        f"unsupported shape: {cls.__name__} is neither a dataclass nor a named tuple"
    )


def resolve_fields(
    cls: type, named: bool = False, sequential: bool = False, base: int = 0
) -> tuple[ResolvedField, ...]:
    """Resolve the mapped fields of a dataclass or named tuple.

    Dataclasses default to named mapping, named tuples to sequential mapping.
    Sequential indexes start at ``base``; skipped fields take no index.
    """
    if not isinstance(cls, type):
        raise MappingError(f"expected a class, not {type(cls).__name__}")
    entries, has_names = _entries(cls)
    mode = BindingMode.from_flags(named, sequential, has_names)
    kept = [(name, options) for name, options in entries if not options.skip]

    errors: list[str] = []
    resolved: list[ResolvedField] = []
    for position, (name, options) in enumerate(kept):
        if options.index is not None and options.index < base:
            errors.append(f"field {name!r}: index {options.index} is below {base}")
            continue
        identity = FieldIdentity.from_field(
            name, position, options.rename, options.index, not mode.is_named(), base
        )
        resolved.append(ResolvedField(name, identity, options.convert))
    if errors:
        raise MappingError("; ".join(errors))

    if mode.is_named():
        names = [item.identity.name for item in resolved]
        if None in names or len(set(names)) < len(names):
            raise MappingError("not all fields have names")

    return tuple(resolved)