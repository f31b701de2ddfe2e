"""Shared utility functions."""

from __future__ import annotations

import os
from pathlib import Path

# Path segment that marks a per-user install on macOS.
USER_HOME_MARKER = "/Users/"


def expand_path(raw: str | Path) -> Path:
    """Expand ``~`` and return an absolute, normalized path.

    Purely lexical: the path is not required to exist. If the home
    directory can't be determined the tilde is left in place.
    """
    return Path(os.path.abspath(os.path.expanduser(str(raw))))


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
