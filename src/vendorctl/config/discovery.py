"""Locate the vendorctl.toml that governs a workspace.

``VENDORCTL_CONFIG`` pins the file explicitly. Otherwise the nearest
vendorctl.toml at or above the starting directory wins, and its directory
becomes the workspace root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "vendorctl.toml"
CONFIG_ENV_VAR = "VENDORCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``VENDORCTL_CONFIG`` that names a missing file yields None rather
    than falling back to the walk-up search.
    """
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
