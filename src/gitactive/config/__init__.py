"""Configuration loading, schema, and defaults."""

from gitactive.config.loader import ConfigError, load_config
from gitactive.config.schema import GitActiveConfig

__all__ = [
    "ConfigError",
    "GitActiveConfig",
    "load_config",
]
