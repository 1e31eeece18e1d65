"""Configuration module for StarterKit.

This module provides YAML configuration parsing and validation for
starterkit.yaml.
"""

from starterkit.config.parser import (
    DEFAULT_CONFIG_NAME,
    StarterConfig,
    ConfigError,
    parse_config,
    parse_config_data,
)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "StarterConfig",
    "ConfigError",
    "parse_config",
    "parse_config_data",
]
