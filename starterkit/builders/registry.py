"""
Registry of builders supported by StarterKit.

The registry is an immutable table from builder identifier to
BuilderDescriptor. It answers metadata queries for the scaffolding engine
and reduces a list of requested builders to a conflict-free set.

Queries never raise on unknown builders. They log a warning, attach an
advisory Diagnostic to the result where the return type allows it, and
return an empty answer.

Example:
    >>> registry = BuilderRegistry()
    >>> registry.file_for_builder("Module::Build")
    'Build.PL'
    >>> registry.check_compatibility(["Module::Install", "ExtUtils::MakeMaker"]).builders
    ['Module::Install']
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Tuple

from starterkit.builders.descriptor import (
    BuilderDescriptor,
    ExternalDependency,
    GeneratorKind,
    ManifestKind,
)
from starterkit.core.diagnostics import Diagnostic
from starterkit.core.exceptions import BuilderRegistryError, UnknownBuilderError

logger = logging.getLogger(__name__)


DEFAULT_BUILDER = "ExtUtils::MakeMaker"

_MAKEFILE_INSTRUCTIONS = (
    "perl Makefile.PL",
    "make",
    "make test",
    "make install",
)

BUILTIN_BUILDERS: Mapping[str, BuilderDescriptor] = MappingProxyType(
    {
        "Module::Build": BuilderDescriptor(
            output_file="Build.PL",
            generator=GeneratorKind.BUILD_PL,
            manifest=ManifestKind.MODULE_BUILD,
            instructions=(
                "perl Build.PL",
                "./Build",
                "./Build test",
                "./Build install",
            ),
        ),
        "Module::Install": BuilderDescriptor(
            output_file="Makefile.PL",
            generator=GeneratorKind.MI_MAKEFILE_PL,
            manifest=ManifestKind.MODULE_INSTALL,
            instructions=_MAKEFILE_INSTRUCTIONS,
        ),
        "ExtUtils::MakeMaker": BuilderDescriptor(
            output_file="Makefile.PL",
            generator=GeneratorKind.MAKEFILE_PL,
            manifest=ManifestKind.MAKEMAKER,
            instructions=_MAKEFILE_INSTRUCTIONS,
            dependencies=(
                ExternalDependency("make", ("make", "gmake")),
                ExternalDependency("chmod", ("chmod",)),
            ),
        ),
    }
)


@dataclass(frozen=True)
class LookupResult:
    """Outcome of a single builder lookup."""

    builder: str
    descriptor: Optional[BuilderDescriptor]
    diagnostics: Tuple[Diagnostic, ...] = ()

    def __bool__(self) -> bool:
        return self.descriptor is not None


@dataclass
class CompatibilityResult:
    """Builders that survived compatibility filtering, plus advisories."""

    builders: List[str]
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def __iter__(self) -> Iterator[str]:
        return iter(self.builders)

    def __len__(self) -> int:
        return len(self.builders)


class BuilderRegistry:
    """
    Immutable table of builder metadata.

    Construct one instance at startup and pass it to whatever needs it. The
    table can be replaced for testing, but it cannot be changed once the
    registry exists.
    """

    def __init__(
        self,
        entries: Optional[Mapping[str, BuilderDescriptor]] = None,
        default: str = DEFAULT_BUILDER,
    ):
        """
        Initialize registry.

        Args:
            entries: Builder table. If None, uses the built-in table.
            default: Identifier substituted for empty lookups

        Raises:
            BuilderRegistryError: If default is not a key of entries
        """
        table = dict(BUILTIN_BUILDERS if entries is None else entries)
        if default not in table:
            raise BuilderRegistryError(
                f"Default builder '{default}' is not in the builder table"
            )
        self._entries: Mapping[str, BuilderDescriptor] = MappingProxyType(table)
        self._default = default
        logger.debug(f"Loaded builder registry with {len(table)} builders")

    @property
    def entries(self) -> Mapping[str, BuilderDescriptor]:
        """Read-only view of the builder table."""
        return self._entries

    def supported_builders(self) -> FrozenSet[str]:
        """Return all known builder identifiers (no meaningful order)."""
        return frozenset(self._entries)

    def default_builder(self) -> str:
        """Return the identifier of the default builder."""
        return self._default

    def has_builder(self, builder: Optional[str]) -> bool:
        return bool(builder) and builder in self._entries

    # ========================================================================
    # Lookup Methods
    # ========================================================================

    def lookup(self, builder: Optional[str] = None) -> LookupResult:
        """
        Look up builder metadata.

        Args:
            builder: Builder identifier. Empty or None means the default.

        Returns:
            LookupResult. Falsy, with one UNKNOWN_BUILDER diagnostic, when
            the builder is not known.
        """
        builder = builder or self._default
        descriptor = self._entries.get(builder)
        if descriptor is None:
            diagnostic = Diagnostic.unknown_builder(builder)
            logger.warning(diagnostic.message)
            return LookupResult(builder, None, (diagnostic,))
        return LookupResult(builder, descriptor)

    def require(self, builder: Optional[str] = None) -> BuilderDescriptor:
        """
        Look up builder metadata, raising instead of warning.

        Raises:
            UnknownBuilderError: If the builder is not known
        """
        builder = builder or self._default
        if builder not in self._entries:
            raise UnknownBuilderError(builder)
        return self._entries[builder]

    def file_for_builder(self, builder: Optional[str] = None) -> Optional[str]:
        """Return the build-control file the builder generates."""
        descriptor = self.lookup(builder).descriptor
        return descriptor.output_file if descriptor else None

    def create_method_for_builder(self, builder: Optional[str] = None) -> Optional[str]:
        """Return the identifier of the routine that creates the output file."""
        descriptor = self.lookup(builder).descriptor
        return descriptor.create_method_name if descriptor else None

    def manifest_method_for_builder(
        self, builder: Optional[str] = None
    ) -> Optional[str]:
        """Return the identifier of the routine that creates the manifest."""
        descriptor = self.lookup(builder).descriptor
        return descriptor.manifest_method_name if descriptor else None

    def instructions_for_builder(self, builder: Optional[str] = None) -> Tuple[str, ...]:
        """
        Return the commands that configure, build, test and install a
        generated module, in the order a user runs them.
        """
        descriptor = self.lookup(builder).descriptor
        return descriptor.instructions if descriptor else ()

    def dependencies_for_builder(
        self, builder: Optional[str] = None
    ) -> Tuple[ExternalDependency, ...]:
        """Return the host commands the builder needs."""
        descriptor = self.lookup(builder).descriptor
        return descriptor.dependencies if descriptor else ()

    # ========================================================================
    # Compatibility
    # ========================================================================

    def check_compatibility(
        self, requested: Optional[Iterable[str]] = None
    ) -> CompatibilityResult:
        """
        Reduce requested builders to a supported, conflict-free list.

        Unknown builders are dropped with a warning. Builders that generate
        the same output file are mutually exclusive: the one requested first
        wins and the others are dropped with a warning. A builder requested
        twice is dropped silently. If nothing survives, the default builder
        is returned.

        Args:
            requested: Builder identifiers in order of preference. A single
                identifier is accepted, and a list nested as the first
                element is unwrapped.

        Returns:
            CompatibilityResult with builders in order of acceptance
        """
        if isinstance(requested, str):
            requested = [requested]
        candidates = list(requested or ())
        if candidates and isinstance(candidates[0], (list, tuple)):
            candidates = list(candidates[0])

        diagnostics: List[Diagnostic] = []
        supported: List[Tuple[str, BuilderDescriptor]] = []
        for builder in candidates:
            if not builder:
                continue
            result = self.lookup(builder)
            diagnostics.extend(result.diagnostics)
            if result.descriptor is not None:
                supported.append((builder, result.descriptor))

        if not supported:
            supported.append((self._default, self._entries[self._default]))

        claimed: Dict[str, str] = {}
        accepted: List[str] = []
        for builder, descriptor in supported:
            winner = claimed.get(descriptor.output_file)
            if winner is None:
                claimed[descriptor.output_file] = builder
                accepted.append(builder)
            elif winner != builder:
                diagnostic = Diagnostic.mutually_exclusive(builder, winner)
                logger.warning(diagnostic.message)
                diagnostics.append(diagnostic)

        return CompatibilityResult(accepted, diagnostics)

    def __contains__(self, builder: object) -> bool:
        return builder in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} builders={sorted(self._entries)!r} "
            f"default={self._default!r}>"
        )


__all__ = [
    "DEFAULT_BUILDER",
    "BUILTIN_BUILDERS",
    "LookupResult",
    "CompatibilityResult",
    "BuilderRegistry",
]
