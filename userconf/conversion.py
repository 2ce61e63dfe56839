"""Conversion between parsed config data and caller-supplied types.

Parsers hand back plain data (dicts, lists, scalars). :func:`from_data` builds
the caller's type from it, :func:`to_data` goes the other way before a value
is written. Dataclasses are the supported structured type; their fields may
be nested dataclasses, ``Optional``/union types, ``list``, ``tuple``, ``dict``,
``Enum`` members or :class:`pathlib.Path`.
"""

from __future__ import annotations

import dataclasses
import enum
import types
import typing
from collections.abc import Mapping
from pathlib import PurePath
from typing import Any, Union

__all__ = ["ConversionError", "from_data", "to_data"]


class ConversionError(TypeError):
    """The data does not fit the target type.

    ``location`` is the dotted path of the offending field (empty at top level).
    """

    def __init__(self, message: str, location: str = "") -> None:
        self.location = location
        self.reason = message
        super().__init__(f"{location}: {message}" if location else message)


def _is_optional(tp: Any) -> bool:
    return _is_union(tp) and type(None) in typing.get_args(tp)


def _is_union(tp: Any) -> bool:
    origin = typing.get_origin(tp)
    return origin is Union or origin is types.UnionType


def _join(location: str, key: Any) -> str:
    if isinstance(key, int):
        return f"{location}[{key}]"
    return f"{location}.{key}" if location else str(key)


def from_data(cls: Any, data: Any, location: str = "") -> Any:
    """Build an instance of *cls* from plain *data*.

    ``None`` and :data:`typing.Any` as *cls* return *data* untouched.
    """
    if cls is None or cls is Any:
        return data

    if _is_union(cls):
        if data is None and _is_optional(cls):
            return None
        errors = []
        for option in typing.get_args(cls):
            if option is type(None):
                continue
            try:
                return from_data(option, data, location)
            except ConversionError as exc:
                errors.append(exc.reason)
        raise ConversionError(
            "no union member accepts the value (" + "; ".join(errors) + ")", location
        )

    if dataclasses.is_dataclass(cls) and isinstance(cls, type):
        return _dataclass_from_data(cls, data, location)

    origin = typing.get_origin(cls)
    args = typing.get_args(cls)

    if origin is list or cls is list:
        if not isinstance(data, list):
            raise ConversionError(f"expected an array, got {type(data).__name__}", location)
        item_type = args[0] if args else None
        return [from_data(item_type, item, _join(location, i)) for i, item in enumerate(data)]

    if origin is tuple or cls is tuple:
        if not isinstance(data, (list, tuple)):
            raise ConversionError(f"expected an array, got {type(data).__name__}", location)
        if not args:
            return tuple(data)
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(from_data(args[0], item, _join(location, i)) for i, item in enumerate(data))
        if len(args) != len(data):
            raise ConversionError(f"expected {len(args)} items, got {len(data)}", location)
        return tuple(from_data(t, item, _join(location, i)) for i, (t, item) in enumerate(zip(args, data)))

    if origin is dict or cls is dict or origin is Mapping:
        if not isinstance(data, Mapping):
            raise ConversionError(f"expected a table, got {type(data).__name__}", location)
        value_type = args[1] if len(args) == 2 else None
        return {key: from_data(value_type, item, _join(location, key)) for key, item in data.items()}

    if isinstance(cls, type) and issubclass(cls, enum.Enum):
        try:
            return cls(data)
        except ValueError:
            raise ConversionError(f"{data!r} is not a valid {cls.__name__}", location) from None

    if isinstance(cls, type) and issubclass(cls, PurePath):
        if not isinstance(data, str):
            raise ConversionError(f"expected a path string, got {type(data).__name__}", location)
        return cls(data)

    if cls is float:
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            raise ConversionError(f"expected a float, got {type(data).__name__}", location)
        return float(data)

    if cls is int and isinstance(data, bool):
        raise ConversionError("expected an integer, got bool", location)

    if isinstance(cls, type):
        if not isinstance(data, cls):
            raise ConversionError(
                f"expected {cls.__name__}, got {type(data).__name__}", location
            )
        return data

    raise ConversionError(f"unsupported target type {cls!r}", location)


def _dataclass_from_data(cls: type, data: Any, location: str) -> Any:
    if not isinstance(data, Mapping):
        raise ConversionError(f"expected a table, got {type(data).__name__}", location)

    try:
        hints = typing.get_type_hints(cls)
    except NameError as exc:
        # Forward references to classes local to a function
        raise ConversionError(str(exc), location) from exc
    kwargs = {}
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        field_type = hints.get(f.name, Any)
        if f.name in data:
            kwargs[f.name] = from_data(field_type, data[f.name], _join(location, f.name))
        elif f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING:
            continue
        elif _is_optional(field_type):
            kwargs[f.name] = None
        else:
            raise ConversionError("missing field", _join(location, f.name))

    # Unknown keys are ignored
    try:
        return cls(**kwargs)
    except (TypeError, ValueError) as exc:
        raise ConversionError(str(exc), location) from exc


def to_data(value: Any) -> Any:
    """Return *value* as plain data (dicts, lists and scalars)."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_data(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, Mapping):
        return {key: to_data(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_data(item) for item in value]
    return value
