"""
Builders supported by StarterKit.
"""

from starterkit.builders.descriptor import (
    BuilderDescriptor,
    ExternalDependency,
    GeneratorKind,
    ManifestKind,
)
from starterkit.builders.registry import (
    DEFAULT_BUILDER,
    BUILTIN_BUILDERS,
    BuilderRegistry,
    CompatibilityResult,
    LookupResult,
)
from starterkit.builders.dispatch import GeneratorTable
from starterkit.builders.dependencies import (
    check_builders,
    find_command,
    missing_dependencies,
)

__all__ = [
    "BuilderDescriptor",
    "ExternalDependency",
    "GeneratorKind",
    "ManifestKind",
    "DEFAULT_BUILDER",
    "BUILTIN_BUILDERS",
    "BuilderRegistry",
    "CompatibilityResult",
    "LookupResult",
    "GeneratorTable",
    "check_builders",
    "find_command",
    "missing_dependencies",
]
