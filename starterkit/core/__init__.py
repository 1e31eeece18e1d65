"""
Core functionality for StarterKit.

This package contains the exception hierarchy and diagnostic types that
the builder and config packages depend on.
"""

from .exceptions import (
    StarterKitError,
    BuilderError,
    BuilderRegistryError,
    UnknownBuilderError,
    MutuallyExclusiveBuildersError,
    GeneratorNotRegisteredError,
    ConfigError,
)

from .diagnostics import (
    Diagnostic,
    DiagnosticKind,
)

__all__ = [
    "StarterKitError",
    "BuilderError",
    "BuilderRegistryError",
    "UnknownBuilderError",
    "MutuallyExclusiveBuildersError",
    "GeneratorNotRegisteredError",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
]
