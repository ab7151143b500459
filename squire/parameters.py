"""Binding record objects and plain values as statement parameters."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar, overload

from .bind import BindValue, to_bind_value
from .mapping import ResolvedField, resolve_fields

__all__ = ["bind_parameters", "parameters"]

_ATTRIBUTE = "__squire_parameters__"

T = TypeVar("T", bound=type)


@overload
def parameters(cls: T, *, named: bool = ..., sequential: bool = ...) -> T: ...


@overload
def parameters(
    cls: None = ..., *, named: bool = ..., sequential: bool = ...
) -> Callable[[T], T]: ...


def parameters(cls=None, *, named=False, sequential=False):
    """Mark a dataclass or named tuple as bindable statement parameters.

    Named fields bind to named parameters (``:a``, ``@a``, ``$a``);
    sequential fields bind to positional parameters starting at 1.
    Usable as ``@parameters`` or ``@parameters(sequential=True)``.
    """

    def apply(target: T) -> T:
        fields = resolve_fields(target, named=named, sequential=sequential, base=1)
        setattr(target, _ATTRIBUTE, fields)
        return target

    if cls is None:
        return apply
    return apply(cls)


def _field_value(obj: Any, item: ResolvedField) -> BindValue:
    value = getattr(obj, item.attribute)
    if item.convert is not None:
        value = item.convert(value)
    return to_bind_value(value)


def _bind_fields(
    obj: Any, fields: tuple[ResolvedField, ...]
) -> dict[str, BindValue] | tuple[BindValue, ...]:
    if not fields:
        return ()
    if all(item.identity.name is not None for item in fields):
        return {item.identity.name: _field_value(obj, item) for item in fields}
    by_index: dict[int, BindValue] = {}
    for item in fields:
        by_index[item.identity.index] = _field_value(obj, item)
    return tuple(by_index.get(index) for index in range(1, max(by_index) + 1))


def bind_parameters(obj: Any) -> dict[str, BindValue] | tuple[BindValue, ...]:
    """Convert ``obj`` into parameters for a sqlite3 ``execute`` call.

    Objects of classes marked with :func:`parameters` bind by their fields.
    Mappings bind by name, tuples and lists by position, and any other value
    binds as the single positional parameter. Unfilled positions bind ``NULL``.
    """
    fields = getattr(type(obj), _ATTRIBUTE, None)
    if fields is not None:
        return _bind_fields(obj, fields)
    if isinstance(obj, Mapping):
        return {str(key): to_bind_value(value) for key, value in obj.items()}
    if isinstance(obj, (tuple, list)):
        return tuple(to_bind_value(value) for value in obj)
    return (to_bind_value(obj),)