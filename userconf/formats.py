"""Format tags and the parsers/emitters behind them.

TOML is read with :mod:`tomllib` and written with ``tomli_w``; JSON uses the
standard :mod:`json` module; YAML goes through PyYAML's safe loader and dumper.
All streams are binary and text is always UTF-8.
"""

from __future__ import annotations

import enum
import json
import tomllib
from collections.abc import Mapping
from typing import Any, BinaryIO

import tomli_w
import yaml

__all__ = ["Format", "FormatError", "deserialize", "serialize"]


class Format(enum.Enum):
    """Serialization format, valued by the file extension it is stored under."""

    TOML = "toml"
    JSON = "json"
    YAML = "yml"

    @property
    def extension(self) -> str:
        return self.value


class FormatError(Exception):
    """A parser or emitter rejected the data."""

    def __init__(self, fmt: Format, cause: Exception) -> None:
        super().__init__(f"{fmt.name}: {cause}")
        self.format = fmt
        self.cause = cause


def deserialize(reader: BinaryIO, fmt: Format) -> Any:
    """Parse the whole of *reader* as *fmt* and return plain Python data."""
    try:
        if fmt is Format.TOML:
            return tomllib.load(reader)
        if fmt is Format.JSON:
            return json.load(reader)
        return yaml.safe_load(reader)
    except (ValueError, yaml.YAMLError) as exc:
        # TOMLDecodeError, JSONDecodeError and UnicodeDecodeError are ValueErrors
        raise FormatError(fmt, exc) from exc


def serialize(writer: BinaryIO, value: Any, fmt: Format) -> None:
    """Write *value* (plain data) to *writer* as *fmt*."""
    try:
        if fmt is Format.TOML:
            if not isinstance(value, Mapping):
                raise TypeError(
                    f"TOML documents must be tables, not {type(value).__name__}"
                )
            tomli_w.dump(_drop_none(value), writer)
        elif fmt is Format.JSON:
            text = json.dumps(value, ensure_ascii=False, indent=2)
            writer.write(text.encode("utf-8"))
        else:
            text = yaml.safe_dump(
                value, allow_unicode=True, sort_keys=False, default_flow_style=False
            )
            writer.write(text.encode("utf-8"))
    except (TypeError, ValueError, yaml.YAMLError) as exc:
        raise FormatError(fmt, exc) from exc


def _drop_none(table: Mapping) -> dict:
    # TOML has no null; absent keys stand for None inside tables.
    # None inside arrays is left alone and rejected by the emitter.
    result = {}
    for key, item in table.items():
        if item is None:
            continue
        if isinstance(item, Mapping):
            item = _drop_none(item)
        elif isinstance(item, list):
            item = [_drop_none(x) if isinstance(x, Mapping) else x for x in item]
        result[key] = item
    return result
