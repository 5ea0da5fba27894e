"""Configuration file loading."""

import os
import sys

from pathlib import Path
from typing import Optional

import yaml

from pydantic import ValidationError

from .defaults import get_default_config
from .schema import StatusLineSettings

# Module-level cache for config
_cached_config: Optional[StatusLineSettings] = None
_cached_mtime: float = 0.0


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "block-timer-statusline"


def get_config_path() -> Path:
    """Get the full configuration file path."""
    return get_config_dir() / "config.yaml"


def clear_config_cache() -> None:
    """Forget the cached configuration so the next load re-reads the file."""
    global _cached_config, _cached_mtime

    _cached_config = None
    _cached_mtime = 0.0


def load_config() -> StatusLineSettings:
    """
    Load configuration from YAML file with mtime-based caching.

    If config file doesn't exist, returns defaults without writing anything.
    If config is invalid, falls back to defaults and logs error.
    """
    global _cached_config, _cached_mtime

    config_path = get_config_path()

    try:
        current_mtime = config_path.stat().st_mtime
    except OSError:
        return get_default_config()

    if _cached_config is not None and current_mtime == _cached_mtime:
        return _cached_config

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        config = StatusLineSettings(**config_data)

        _cached_config = config
        _cached_mtime = current_mtime

        return config

    except (yaml.YAMLError, ValidationError, OSError, TypeError) as e:
        print(
            f"Warning: Failed to load config from {config_path}: {e}",
            file=sys.stderr,
        )
        print("Using default configuration.", file=sys.stderr)
        return get_default_config()
