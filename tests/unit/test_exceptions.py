from pathlib import Path

from userconf.exceptions import (
    ConfigError,
    FailedToCreateConfigDir,
    FailedToCreateDefaultConfigFile,
    FailedToDeserializeConfigFile,
    FailedToFindConfigFile,
    FailedToOpenConfigFile,
    FailedToSerializeDefaultConfig,
    UnknownConfigDirectory,
)
from userconf.formats import Format


class TestConfigErrors:
    """Error taxonomy and message formatting."""

    def test_all_variants_are_config_errors(self):
        path = Path("cfg/app.toml")
        errors = [
            UnknownConfigDirectory(),
            FailedToFindConfigFile("ns", "app"),
            FailedToOpenConfigFile(path, OSError("x")),
            FailedToCreateConfigDir(path.parent, OSError("x")),
            FailedToCreateDefaultConfigFile(path, OSError("x")),
            FailedToDeserializeConfigFile(path, Format.TOML, ValueError("x")),
            FailedToSerializeDefaultConfig(path, TypeError("x")),
        ]
        assert all(isinstance(err, ConfigError) for err in errors)

    def test_unknown_config_directory_message(self):
        err = UnknownConfigDirectory()
        assert str(err) == "Unknown config directory"
        assert err.cause is None
        assert err.path is None

    def test_message_includes_path_and_cause(self):
        cause = PermissionError("denied")
        err = FailedToOpenConfigFile(Path("cfg/app.toml"), cause)
        assert err.cause is cause
        assert str(err) == f"Failed to open config file: {Path('cfg/app.toml')} (denied)"

    def test_find_error_keeps_lookup_key(self):
        err = FailedToFindConfigFile("ns", "app", Path("root/ns/app"))
        assert (err.namespace, err.name) == ("ns", "app")
        assert str(err).startswith("Failed to find config file")

    def test_deserialize_error_keeps_format(self):
        err = FailedToDeserializeConfigFile(Path("a.yml"), Format.YAML, ValueError("bad"))
        assert err.format is Format.YAML
