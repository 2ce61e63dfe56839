"""Per-user configuration files in TOML, JSON or YAML.

Configurations live under the OS configuration root, one subdirectory per
namespace::

    from userconf import load_or_default

    settings = load_or_default("myapp", "settings", Settings())
"""

from .exceptions import (
    ConfigError,
    FailedToCreateConfigDir,
    FailedToCreateDefaultConfigFile,
    FailedToDeserializeConfigFile,
    FailedToFindConfigFile,
    FailedToOpenConfigFile,
    FailedToSerializeDefaultConfig,
    UnknownConfigDirectory,
)
from .formats import Format, FormatError, deserialize, serialize
from .loader import find_config_file, load, load_or_default
from .logging_config import setup_logging
from .paths import user_config_dir

__all__: list[str] = [
    "ConfigError",
    "FailedToCreateConfigDir",
    "FailedToCreateDefaultConfigFile",
    "FailedToDeserializeConfigFile",
    "FailedToFindConfigFile",
    "FailedToOpenConfigFile",
    "FailedToSerializeDefaultConfig",
    "Format",
    "FormatError",
    "UnknownConfigDirectory",
    "deserialize",
    "find_config_file",
    "load",
    "load_or_default",
    "serialize",
    "setup_logging",
    "user_config_dir",
]
