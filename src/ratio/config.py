from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib as toml
except Exception:
    import tomli as toml  # type: ignore

from ratio.utility import UserInputError
from ratio.workspace import settings_path

DEFAULTS: dict[str, dict[str, Any]] = {
    "OUTPUT": {
        "COLOR": True,
        "SEPARATOR": ":",
    },
    "BEHAVIOUR": {
        "DEBUG": False,
        "SHOW_FACTORS": False,
    },
}


class ConfigError(UserInputError):
    pass


@dataclass
class Settings:
    """
    Wrap the merged settings dict (defaults overlaid with the TOML file).
    .as_dict() feeds runtime.apply().
    """
    data: dict[str, Any]
    name: str
    _source: Path | None = None

    def as_dict(self) -> dict[str, Any]:
        return self.data


# --- I/O -------------------------------------------------------------------


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return toml.load(f)
    except OSError as e:
        raise ConfigError(f"reading {path}: {e.strerror or e}.") from None
    except toml.TOMLDecodeError as e:
        lineno = getattr(e, "lineno", None)
        colno = getattr(e, "colno", None)
        msg = getattr(e, "msg", str(e))
        where = []
        if lineno is not None:
            where.append(f"line {lineno}")
        if colno is not None:
            where.append(f"column {colno}")
        loc = f" (at {', '.join(where)})" if where else ""
        # No traceback chaining
        raise ConfigError(f"reading {path.name}: {msg}{loc}.") from None


def _merge(raw: dict[str, Any]) -> dict[str, Any]:
    """Overlay raw onto DEFAULTS; known keys with the wrong type keep the default."""
    data = copy.deepcopy(DEFAULTS)
    for section, values in raw.items():
        if not isinstance(values, dict):
            data[section] = values
            continue
        target = data.setdefault(section, {})
        if not isinstance(target, dict):
            data[section] = target = {}
        for key, value in values.items():
            known = DEFAULTS.get(section, {}).get(key)
            if known is not None and type(value) is not type(known):
                continue
            target[key] = value
    return data


# --- Public API ------------------------------------------------------------


def default_settings() -> Settings:
    return Settings(data=copy.deepcopy(DEFAULTS), name="default")


def load_settings(path: str | Path | None = None) -> Settings:
    """
    Load settings from `path`, or from the workspace settings.toml.

    An explicit path must exist; a missing workspace file just means
    defaults.
    """
    if path is None:
        path = settings_path()
        if not path.is_file():
            return default_settings()
    path = Path(path).expanduser()
    if not path.is_file():
        raise ConfigError(f"settings file not found: {path}")

    raw = _load_toml(path)
    return Settings(data=_merge(raw), name=path.stem, _source=path)
