"""Configuration handling for license-headers."""
from __future__ import annotations

from license_headers.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_headers.config.loader import (
    find_config_file,
    load_config,
    load_config_file,
)
from license_headers.models.config import TaskConfig

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "TaskConfig",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
