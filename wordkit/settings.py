#!/usr/bin/env python3
"""Settings loader for WordKit."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

from .errors import ConfigurationError

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
CONFIG_ENV_VAR = "WORDKIT_CONFIG"


def config_path() -> Path:
    """Path of the active app config (``WORDKIT_CONFIG`` overrides the bundled file)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return resolve_path(override, base=Path.cwd())
    return APP_CONFIG_PATH


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    path = config_path()
    if not path.exists():
        raise FileNotFoundError(f"Missing app config: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    return data or {}


def load_yaml_file(path: str | Path) -> dict:
    """Load an arbitrary YAML mapping, e.g. a generator profile."""
    path = resolve_path(str(path), base=Path.cwd())
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return data


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    data = load_app_config()
    current: Any = data
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path string relative to the package root (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    expanded = os.path.expanduser(str(value))
    path = Path(expanded)
    if not path.is_absolute():
        base = base or PACKAGE_ROOT
        path = (base / path).resolve()
    return path


__all__ = [
    "load_app_config",
    "load_yaml_file",
    "get_setting",
    "resolve_path",
    "config_path",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
