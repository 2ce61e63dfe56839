from __future__ import annotations

"""Per-user configuration root resolution.

On Windows: ``%APPDATA%``
On macOS: ``~/Library/Application Support``
Elsewhere: ``$XDG_CONFIG_HOME`` or ``~/.config``
"""

import os
import sys
from pathlib import Path
from typing import Optional

__all__ = ["user_config_dir"]


def _home_dir() -> Optional[Path]:
    home = os.environ.get("HOME")
    if home:
        return Path(home)
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        # No HOME and no passwd entry for the current user
        return None


def user_config_dir() -> Optional[Path]:
    """Return the OS configuration root for the current user, or ``None``."""
    if os.name == 'nt':  # Windows
        appdata = os.environ.get('APPDATA')
        return Path(appdata) if appdata else None

    if sys.platform == 'darwin':
        home = _home_dir()
        return home / "Library" / "Application Support" if home else None

    xdg = os.environ.get('XDG_CONFIG_HOME')
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    home = _home_dir()
    return home / ".config" if home else None
