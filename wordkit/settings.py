#!/usr/bin/env python3
"""
wordkit settings
================
Model and generation defaults live in ``wordkit/configs/app.yaml``:

    markov.*      order, prior and the two retry caps
    generation.*  count, length bounds, duplicate handling
    logging.*     level and format used by the CLI
    ui.*          table limits for terminal output

Set ``$WORDKIT_CONFIG`` to read another YAML file instead. The file is
parsed once per process; call ``load_app_config.cache_clear()`` after
switching it.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
APP_CONFIG_PATH = PACKAGE_ROOT / "configs" / "app.yaml"
CONFIG_ENV_VAR = "WORDKIT_CONFIG"


def config_path() -> Path:
    """The bundled app.yaml, or the file named by $WORDKIT_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return resolve_path(override)
    return APP_CONFIG_PATH


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    """
    Parse the active config file.

    An empty file counts as an empty mapping, so every lookup falls back
    to its default.

    Raises:
        FileNotFoundError: If the config file does not exist
    """
    path = config_path()
    if not path.exists():
        raise FileNotFoundError(f"Missing wordkit config: {path}")
    data = yaml.safe_load(path.read_text())
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """
    Look up a setting such as ``markov.order``.

    Returns default when any part of the path is missing. A key that is
    present with a null value returns None, not the default.
    """
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Expand ~ and resolve a user-supplied path against base (default: cwd)."""
    if value is None:
        raise ValueError("path value is required")
    path = Path(os.path.expanduser(str(value)))
    if not path.is_absolute():
        path = ((base or Path.cwd()) / path).resolve()
    return path


__all__ = [
    "load_app_config",
    "get_setting",
    "resolve_path",
    "config_path",
    "APP_CONFIG_PATH",
    "CONFIG_ENV_VAR",
]
