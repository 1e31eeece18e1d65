"""
Host checks for builder dependencies.

Locates the commands a builder needs (e.g. make or gmake) without running
them, so the engine can tell the user what to install before printing
build instructions.
"""

import logging
import shutil
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from starterkit.builders.descriptor import ExternalDependency
from starterkit.builders.registry import BuilderRegistry

logger = logging.getLogger(__name__)


def find_command(
    dependency: ExternalDependency, custom_paths: Optional[Dict[str, str]] = None
) -> Optional[Path]:
    """
    Locate a binary that satisfies a dependency.

    Priority order:
    1. Custom path (from config), keyed by the canonical command
    2. Each alias on the system PATH, in display order

    Args:
        dependency: Dependency to satisfy
        custom_paths: Optional dict of command name to binary path

    Returns:
        Path to the binary, or None if not found
    """
    custom_paths = custom_paths or {}

    if dependency.command in custom_paths:
        custom_path = Path(custom_paths[dependency.command])
        if custom_path.exists():
            logger.debug(f"Found {dependency.command} via custom path: {custom_path}")
            return custom_path
        logger.debug(f"Custom path for {dependency.command} does not exist: {custom_path}")

    for alias in dependency.aliases:
        found = shutil.which(alias)
        if found:
            logger.debug(f"Found {dependency.command} as {alias} on system PATH")
            return Path(found)

    return None


def missing_dependencies(
    registry: BuilderRegistry,
    builder: Optional[str] = None,
    custom_paths: Optional[Dict[str, str]] = None,
) -> List[ExternalDependency]:
    """
    List the dependencies of a builder that the host cannot satisfy.

    Unknown builders have no dependencies; the registry warns about them.
    """
    return [
        dep
        for dep in registry.dependencies_for_builder(builder)
        if find_command(dep, custom_paths) is None
    ]


def check_builders(
    registry: BuilderRegistry,
    builders: Iterable[str],
    custom_paths: Optional[Dict[str, str]] = None,
) -> Dict[str, List[ExternalDependency]]:
    """
    Check host dependencies for several builders.

    Returns:
        Mapping of builder to its missing dependencies. Builders whose
        dependencies are all present are omitted.
    """
    report: Dict[str, List[ExternalDependency]] = {}
    for builder in builders:
        missing = missing_dependencies(registry, builder, custom_paths)
        if not missing:
            continue
        for dep in missing:
            logger.warning(
                f"Builder '{builder}' needs '{dep.command}' "
                f"(any of: {', '.join(dep.aliases)})"
            )
        report[builder] = missing
    return report


__all__ = ["find_command", "missing_dependencies", "check_builders"]
