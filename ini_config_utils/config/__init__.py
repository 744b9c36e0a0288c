"""Module de configuration."""

from ini_config_utils.config.loader import (
    ConfigFileLoader,
    ConfigLoader,
    FileConfigLoader,
)

__all__ = [
    "ConfigLoader",
    "ConfigFileLoader",
    "FileConfigLoader",
]
