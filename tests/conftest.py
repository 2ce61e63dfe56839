"""Shared fixtures for userconf tests.

Every test runs against a throw-away configuration root: ``HOME`` and
``XDG_CONFIG_HOME`` (and ``APPDATA`` on Windows) point into ``tmp_path`` so
nothing touches the real user configuration.
"""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import userconf.loader as loader_module

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

NAMESPACE = "userconf-tests"


@dataclass
class ServerSettings:
    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class AppSettings:
    """Dataclass config used across tests."""

    title: str = "demo"
    verbose: bool = False
    ratio: float = 0.5
    tags: List[str] = field(default_factory=lambda: ["a", "b"])
    server: ServerSettings = field(default_factory=ServerSettings)
    limits: Dict[str, int] = field(default_factory=lambda: {"retries": 3})
    nickname: Optional[str] = None


@pytest.fixture
def config_root(tmp_path, monkeypatch):
    """Point the platform config root at a temporary directory."""
    root = tmp_path / "config"
    root.mkdir()
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(root))
    monkeypatch.setenv("APPDATA", str(root))
    # macOS ignores XDG_CONFIG_HOME; pin the resolver for the loader
    if sys.platform == "darwin":
        monkeypatch.setattr(loader_module, "user_config_dir", lambda: root)
    return root


@pytest.fixture
def namespace_dir(config_root):
    """The (not yet created) namespace directory under the config root."""
    return config_root / NAMESPACE


@pytest.fixture
def write_config(namespace_dir):
    """Write raw text as ``<namespace>/<name>.<ext>``."""
    def _write(name: str, ext: str, text: str) -> Path:
        namespace_dir.mkdir(parents=True, exist_ok=True)
        path = namespace_dir / f"{name}.{ext}"
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def no_config_root(monkeypatch):
    """Simulate a platform without a resolvable config root."""
    monkeypatch.setattr(loader_module, "user_config_dir", lambda: None)


@pytest.fixture(autouse=True)
def isolate_debug_env(monkeypatch):
    monkeypatch.delenv("USERCONF_DEBUG_MODULES", raising=False)
    yield
