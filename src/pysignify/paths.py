"""Shared filesystem path helpers."""
from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs

_APP_NAME = "pysignify"


def runtime_config_dir() -> Path:
    """Return the per-user configuration directory."""
    return Path(PlatformDirs(appname=_APP_NAME, appauthor=None, roaming=False).user_config_path)


def default_key_dir() -> Path:
    """Return the default directory for generated key files."""
    return Path(PlatformDirs(appname=_APP_NAME, appauthor=None, roaming=False).user_data_path) / "keys"
