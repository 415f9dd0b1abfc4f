"""XDG-compliant path helpers for shimmer configuration."""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir


def get_config_dir() -> Path:
    """Get the config directory for shimmer (config.toml)."""
    override = os.environ.get("SHIMMER_CONFIG_DIR")
    if override:
        return Path(override)
    return Path(user_config_dir("shimmer"))


def get_config_path() -> Path:
    """Get the path to the main config file."""
    return get_config_dir() / "config.toml"


def get_debug_log_path() -> Path:
    """Get the path to the debug log export file."""
    return get_config_dir() / "debug.log"
