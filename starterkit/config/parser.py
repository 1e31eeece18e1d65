"""YAML configuration parser for StarterKit.

This module provides parsing and validation for starterkit.yaml files:

    version: 1
    builders: [Module::Build, ExtUtils::MakeMaker]
    custom_paths:
      make: /opt/bin/gmake
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml

from starterkit.builders.registry import BuilderRegistry, CompatibilityResult
from starterkit.core.exceptions import ConfigError

DEFAULT_CONFIG_NAME = "starterkit.yaml"


@dataclass
class StarterConfig:
    """Complete StarterKit configuration."""

    version: int
    builders: List[str] = field(default_factory=list)  # in order of preference
    custom_paths: Dict[str, str] = field(default_factory=dict)  # command -> binary

    def resolve_builders(self, registry: BuilderRegistry) -> CompatibilityResult:
        """Reduce the configured builders to a compatible set."""
        return registry.check_compatibility(self.builders)


def parse_config(config_path: Optional[Path] = None) -> StarterConfig:
    """
    Parse starterkit.yaml configuration file.

    Args:
        config_path: Path to starterkit.yaml, or a directory containing it.
            Defaults to starterkit.yaml in the current directory.

    Returns:
        Parsed and validated configuration

    Raises:
        ConfigError: If configuration is invalid
    """
    config_path = Path(config_path) if config_path is not None else Path.cwd()
    if config_path.is_dir():
        config_path = config_path / DEFAULT_CONFIG_NAME
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}") from e

    if data is None:
        raise ConfigError("Configuration file is empty")

    return parse_config_data(data)


def parse_config_data(data: Any) -> StarterConfig:
    """Parse and validate configuration data."""
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")

    if "version" not in data:
        raise ConfigError("Missing required field: version")

    if data["version"] != 1:
        raise ConfigError(f"Unsupported version: {data['version']} (expected 1)")

    return StarterConfig(
        version=data["version"],
        builders=_parse_builders(data.get("builders")),
        custom_paths=_parse_custom_paths(data.get("custom_paths")),
    )


def _parse_builders(data: Any) -> List[str]:
    """Parse builder list (a single name is accepted)."""
    if data is None:
        return []
    if isinstance(data, str):
        return [data]
    if not isinstance(data, list) or not all(isinstance(b, str) for b in data):
        raise ConfigError("builders must be a string or a list of strings")
    return list(data)


def _parse_custom_paths(data: Any) -> Dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("custom_paths must be a dictionary")
    for command, path in data.items():
        if not isinstance(path, str):
            raise ConfigError(f"custom_paths.{command} must be a string")
    return {str(command): path for command, path in data.items()}
