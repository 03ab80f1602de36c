"""Shared filesystem path helpers for SSS Core."""
from __future__ import annotations

import sys
from pathlib import Path

from platformdirs import PlatformDirs

_APP_NAME = "SSS Core"
_LINUX_APP_NAME = "sss-core"
_PROJECT_DIR = ".sss"


def runtime_config_dir() -> Path:
    """Return the per-user configuration directory."""
    if sys.platform in {"win32", "darwin"}:
        dirs = PlatformDirs(appname=_APP_NAME, appauthor=None, roaming=True)
    else:
        dirs = PlatformDirs(appname=_LINUX_APP_NAME, appauthor=None, roaming=False)
    return Path(dirs.user_config_path)


def project_config_path() -> Path:
    """Return the config file looked up in the current working directory."""
    return Path.cwd() / _PROJECT_DIR / "config.yaml"
