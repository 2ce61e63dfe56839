from __future__ import annotations

"""Locate, load and default-write per-user configuration files.

A configuration lives at ``<config root>/<namespace>/<name>.<ext>`` where
``<ext>`` is probed in the order ``toml``, ``json``, ``yml``; the first file
that exists decides the format. Nothing is merged: other candidates are
ignored.

When nothing exists, :func:`load_or_default` writes the supplied default as
``<name>.toml`` and hands it back.
"""

import dataclasses
import logging
from pathlib import Path
from typing import Optional, Tuple, Type, TypeVar

from .conversion import ConversionError, from_data, to_data
from .exceptions import (
    FailedToCreateConfigDir,
    FailedToCreateDefaultConfigFile,
    FailedToDeserializeConfigFile,
    FailedToFindConfigFile,
    FailedToOpenConfigFile,
    FailedToSerializeDefaultConfig,
    UnknownConfigDirectory,
)
from .formats import Format, FormatError, deserialize, serialize
from .paths import user_config_dir

logger = logging.getLogger(__name__)

__all__ = ["CANDIDATE_FORMATS", "find_config_file", "load", "load_or_default"]

T = TypeVar("T")

# Probe order; first existing file wins.
CANDIDATE_FORMATS: Tuple[Tuple[str, Format], ...] = (
    ("toml", Format.TOML),
    ("json", Format.JSON),
    ("yml", Format.YAML),
)


def _config_root() -> Path:
    root = user_config_dir()
    if root is None:
        raise UnknownConfigDirectory()
    return root


def _probe(root: Path, namespace: str, name: str) -> Optional[Tuple[Path, Format]]:
    directory = root / namespace
    for ext, fmt in CANDIDATE_FORMATS:
        candidate = directory / f"{name}.{ext}"
        if candidate.exists():
            logger.debug("Using %s config: %s", fmt.name, candidate)
            return candidate, fmt
    return None


def _read(path: Path, fmt: Format, cls: Optional[Type[T]]) -> T:
    try:
        fh = path.open("rb")
    except (OSError, ValueError) as exc:
        raise FailedToOpenConfigFile(path, exc) from exc

    with fh:
        try:
            data = deserialize(fh, fmt)
        except FormatError as exc:
            raise FailedToDeserializeConfigFile(path, fmt, exc.cause) from exc.cause
        except OSError as exc:
            raise FailedToDeserializeConfigFile(path, fmt, exc) from exc

    try:
        return from_data(cls, data)
    except ConversionError as exc:
        raise FailedToDeserializeConfigFile(path, fmt, exc) from exc


def find_config_file(namespace: str, name: str) -> Optional[Tuple[Path, Format]]:
    """Return the path and format of the config file for *namespace*/*name*.

    Returns ``None`` when no candidate extension exists.

    Raises:
        UnknownConfigDirectory: the platform has no configuration root.
    """
    return _probe(_config_root(), namespace, name)


def load(namespace: str, name: str, cls: Optional[Type[T]] = None) -> T:
    """Load the configuration *namespace*/*name*.

    Args:
        namespace: Subdirectory of the configuration root.
        name: File name without extension.
        cls: Target type (typically a dataclass). ``None`` returns the parsed
            data as is.

    Raises:
        UnknownConfigDirectory: the platform has no configuration root.
        FailedToFindConfigFile: none of the candidate files exist.
        FailedToOpenConfigFile: the file could not be opened.
        FailedToDeserializeConfigFile: malformed content, or data that does
            not fit *cls*.
    """
    root = _config_root()
    found = _probe(root, namespace, name)
    if found is None:
        raise FailedToFindConfigFile(namespace, name, root / namespace / name)
    path, fmt = found
    return _read(path, fmt, cls)


def load_or_default(namespace: str, name: str, default: T,
                    cls: Optional[Type[T]] = None) -> T:
    """Load *namespace*/*name*, writing *default* as TOML if it does not exist.

    The target type is *cls* when given, otherwise the type of *default* when
    it is a dataclass instance, otherwise plain data. An existing file always
    wins over *default*, even when they differ.

    On the write path the namespace directory is created as needed and the
    file is created exclusively; a file that appeared in the meantime is
    reported as :class:`FailedToCreateDefaultConfigFile`. A serialization
    failure leaves the freshly created file behind.

    Raises:
        UnknownConfigDirectory, FailedToOpenConfigFile,
        FailedToDeserializeConfigFile, FailedToCreateConfigDir,
        FailedToCreateDefaultConfigFile, FailedToSerializeDefaultConfig
    """
    if cls is None and dataclasses.is_dataclass(default) and not isinstance(default, type):
        cls = type(default)

    root = _config_root()
    found = _probe(root, namespace, name)
    if found is not None:
        path, fmt = found
        return _read(path, fmt, cls)

    namespace_dir = root / namespace
    try:
        namespace_dir.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as exc:
        raise FailedToCreateConfigDir(namespace_dir, exc) from exc

    path = namespace_dir / f"{name}.{Format.TOML.extension}"
    try:
        fh = path.open("xb")
    except (OSError, ValueError) as exc:
        raise FailedToCreateDefaultConfigFile(path, exc) from exc

    with fh:
        try:
            serialize(fh, to_data(default), Format.TOML)
        except FormatError as exc:
            raise FailedToSerializeDefaultConfig(path, exc.cause) from exc.cause
        except OSError as exc:
            raise FailedToSerializeDefaultConfig(path, exc) from exc

    logger.info("Created default config: %s", path)
    return default
