"""
Centralized exception hierarchy for StarterKit.

Registry queries never raise these; they report advisory diagnostics
instead. Exceptions are reserved for strict lookups, generator dispatch
and configuration parsing.
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class StarterKitError(Exception):
    """Base exception for all StarterKit errors."""

    pass


# ============================================================================
# Builder Exceptions
# ============================================================================


class BuilderError(StarterKitError):
    """Base exception for builder-related errors."""

    pass


class BuilderRegistryError(BuilderError):
    """Raised when a builder table is malformed."""

    pass


class UnknownBuilderError(BuilderError):
    """Raised when a builder identifier is not in the registry."""

    def __init__(self, builder: str):
        self.builder = builder
        super().__init__(f"Don't know anything about builder '{builder}'.")


class MutuallyExclusiveBuildersError(BuilderError):
    """Raised when two builders would generate the same output file."""

    def __init__(self, builder: str, winner: str):
        self.builder = builder
        self.winner = winner
        super().__init__(
            f"Builders '{builder}' and '{winner}' are mutually exclusive."
            f"  Using '{winner}'."
        )


class GeneratorNotRegisteredError(BuilderError):
    """Raised when no handler is registered for a builder's generator."""

    def __init__(self, builder: str, kind: str):
        self.builder = builder
        self.kind = kind
        super().__init__(f"No handler registered for '{kind}' (builder '{builder}')")


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(StarterKitError):
    """Configuration parsing or validation error."""

    pass
