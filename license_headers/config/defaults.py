"""Default configuration values for license-headers."""

from __future__ import annotations

from license_headers.models.config import TaskConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-headers.yaml", ".license-headers.yml"]


def get_default_config() -> TaskConfig:
    """Get the default configuration.

    Returns:
        TaskConfig scanning src/main/java and src/test/java into ./build.
    """
    return TaskConfig()
