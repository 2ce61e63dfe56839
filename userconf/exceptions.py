from __future__ import annotations

"""Error taxonomy for configuration loading and default writing.

Every failure is surfaced to the caller as a subclass of :class:`ConfigError`.
Variants that wrap an OS or format-library failure keep the original
exception on ``cause`` (and as ``__cause__`` when raised with ``from``).
"""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .formats import Format


class ConfigError(Exception):
    """Base exception for all configuration errors."""

    def __init__(self, message: str, path: Optional[Path] = None,
                 cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        text = super().__str__()
        if self.path is not None:
            text = f"{text}: {self.path}"
        if self.cause is not None:
            text = f"{text} ({self.cause})"
        return text


class UnknownConfigDirectory(ConfigError):
    """Raised when the platform exposes no per-user configuration root."""

    def __init__(self) -> None:
        super().__init__("Unknown config directory")


class FailedToFindConfigFile(ConfigError):
    """Raised by ``load`` when no ``.toml``, ``.json`` or ``.yml`` file exists."""

    def __init__(self, namespace: str, name: str, base_path: Optional[Path] = None) -> None:
        super().__init__("Failed to find config file", base_path)
        self.namespace = namespace
        self.name = name


class FailedToOpenConfigFile(ConfigError):
    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__("Failed to open config file", path, cause)


class FailedToCreateConfigDir(ConfigError):
    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__("Failed to create config directory", path, cause)


class FailedToCreateDefaultConfigFile(ConfigError):
    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__("Failed to create default config file", path, cause)


class FailedToDeserializeConfigFile(ConfigError):
    """Raised on malformed content or when the data does not fit the target type."""

    def __init__(self, path: Path, format: "Format", cause: Exception) -> None:
        super().__init__("Failed to deserialize config file", path, cause)
        self.format = format


class FailedToSerializeDefaultConfig(ConfigError):
    """Raised when the default value has no TOML representation.

    The default file has already been created at this point and is left on
    disk as is.
    """

    def __init__(self, path: Path, cause: Exception) -> None:
        super().__init__("Failed to serialize default config", path, cause)


__all__ = [
    "ConfigError",
    "UnknownConfigDirectory",
    "FailedToFindConfigFile",
    "FailedToOpenConfigFile",
    "FailedToCreateConfigDir",
    "FailedToCreateDefaultConfigFile",
    "FailedToDeserializeConfigFile",
    "FailedToSerializeDefaultConfig",
]
