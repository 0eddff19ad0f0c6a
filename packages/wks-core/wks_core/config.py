"""Configuration for the workspace store (YAML file + environment)."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .persistence.fs_store import get_wks_home

_CONFIG_CACHE: Dict[str, Dict[str, Any]] = {}
_CONFIG_PATH: Optional[Path] = None

DEFAULT_STORAGE_SETTINGS: Dict[str, Any] = {
    "data_path": None,  # None -> WKS_HOME/storage
    "pretty_print": False,
}

DEFAULT_LOGGING_SETTINGS: Dict[str, Any] = {
    "level": "INFO",
}


def _default_config_path() -> Optional[Path]:
    """Resolve the config path (explicit override, then WKS_CONFIG_PATH)."""
    if _CONFIG_PATH is not None:
        return _CONFIG_PATH
    env_path = os.getenv("WKS_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return None


def get_config_path() -> Optional[Path]:
    """Return the explicitly set config path, if any."""
    return _CONFIG_PATH


def set_config_path(path: str | Path | None) -> None:
    """Point the default configuration at a file (None restores env lookup)."""
    global _CONFIG_PATH
    _CONFIG_PATH = Path(path).expanduser() if path else None


def clear_config_cache() -> None:
    """Clear cached config (primarily for tests)."""
    _CONFIG_CACHE.clear()


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load YAML configuration with caching.

    Args:
        path: Optional custom path. Defaults to WKS_CONFIG_PATH; with no
            file configured, an empty config is returned.
    """
    resolved = Path(path).expanduser() if path else _default_config_path()
    if resolved is None:
        return {}
    key = str(resolved.resolve())
    if key not in _CONFIG_CACHE:
        with open(resolved, "r", encoding="utf-8") as f:
            _CONFIG_CACHE[key] = yaml.safe_load(f) or {}
    return _CONFIG_CACHE[key]


def _get_section(name: str, defaults: Dict[str, Any]) -> Dict[str, Any]:
    section = load_config().get(name)
    merged = dict(defaults)
    if isinstance(section, dict):
        merged.update(section)
    return merged


def get_storage_settings() -> Dict[str, Any]:
    """Return storage settings with data_path resolved to a Path."""
    settings = _get_section("storage", DEFAULT_STORAGE_SETTINGS)
    data_path = settings.get("data_path")
    settings["data_path"] = Path(data_path).expanduser() if data_path else get_wks_home() / "storage"
    settings["pretty_print"] = bool(settings.get("pretty_print"))
    return settings


def get_logging_settings() -> Dict[str, Any]:
    """Return logging settings."""
    return _get_section("logging", DEFAULT_LOGGING_SETTINGS)
