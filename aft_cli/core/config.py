"""Configuration loading."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]

from aft_cli.core.constants import AUTH_KEY, DEFAULT_REPS, DEFAULT_SETS, DEFAULT_WEIGHT, WORKOUTS_KEY


class ConfigError(RuntimeError):
    """Raised when config file parsing fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_data_dir() -> Path:
    """Resolve XDG-style data directory with env override."""
    raw = os.getenv("AFT_DATA_DIR", "~/.local/share/aft")
    return expand_path(raw)


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("AFT_CONFIG_FILE", "~/.config/aft/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    return {
        "storage": {
            "path": str(default_data_dir() / "storage.json"),
            "workouts_key": WORKOUTS_KEY,
            "auth_key": AUTH_KEY,
        },
        "defaults": {
            "sets": DEFAULT_SETS,
            "reps": DEFAULT_REPS,
            "weight": DEFAULT_WEIGHT,
        },
        "auth": {
            "require_login": False,
        },
    }


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text()
    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()
    if cfg_path.exists():
        cfg = _deep_merge(cfg, _read_config(cfg_path))
    return cfg


def resolve_storage_path(config: Dict[str, Any]) -> Path:
    """Resolve the storage file path from env/config."""
    raw = os.getenv("AFT_STORAGE_FILE") or config.get("storage", {}).get("path")
    if not raw:
        raw = str(default_data_dir() / "storage.json")
    return expand_path(raw)


def storage_keys(config: Dict[str, Any]) -> Dict[str, str]:
    """Return the workouts/auth keys, falling back to the built-in names."""
    storage_cfg = config.get("storage", {})
    return {
        "workouts": str(storage_cfg.get("workouts_key") or WORKOUTS_KEY),
        "auth": str(storage_cfg.get("auth_key") or AUTH_KEY),
    }
