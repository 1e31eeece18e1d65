"""
StarterKit: builder metadata for module scaffolding.

Exposes the registry of supported build systems and the helpers the
scaffolding engine uses to pick generators, manifests and instructions.
"""

from starterkit.builders import (
    DEFAULT_BUILDER,
    BuilderDescriptor,
    BuilderRegistry,
    CompatibilityResult,
    ExternalDependency,
    GeneratorKind,
    GeneratorTable,
    LookupResult,
    ManifestKind,
)
from starterkit.core import Diagnostic, DiagnosticKind, StarterKitError

__version__ = "1.70.0"

__all__ = [
    "DEFAULT_BUILDER",
    "BuilderDescriptor",
    "BuilderRegistry",
    "CompatibilityResult",
    "ExternalDependency",
    "GeneratorKind",
    "GeneratorTable",
    "LookupResult",
    "ManifestKind",
    "Diagnostic",
    "DiagnosticKind",
    "StarterKitError",
    "__version__",
]
