from __future__ import annotations

import os
from pathlib import Path

SETTINGS_FILE = "settings.toml"


def workspace_dir() -> Path:
    env = os.environ.get("RATIO_HOME")
    if env:
        return Path(env).expanduser().resolve()
    return (Path.home() / ".config" / "ratio").resolve()


def settings_path() -> Path:
    return workspace_dir() / SETTINGS_FILE
