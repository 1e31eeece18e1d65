"""
Builder metadata types.

A builder is a build system a scaffolded module can use (e.g. Module::Build
or ExtUtils::MakeMaker). Its descriptor records the build-control file it
owns, which generator and manifest routines produce that file, the commands
a user runs afterwards, and the host commands it needs.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Tuple


class GeneratorKind(Enum):
    """Generation routines for a builder's output file."""

    BUILD_PL = "create_Build_PL"
    MI_MAKEFILE_PL = "create_MI_Makefile_PL"
    MAKEFILE_PL = "create_Makefile_PL"


class ManifestKind(Enum):
    """Manifest-creation routines, one per builder family."""

    MODULE_BUILD = "create_MB_MANIFEST"
    MODULE_INSTALL = "create_MI_MANIFEST"
    MAKEMAKER = "create_EUMM_MANIFEST"


@dataclass(frozen=True)
class ExternalDependency:
    """A command that must be available on the host system."""

    command: str
    """Canonical command name"""

    aliases: Tuple[str, ...] = ()
    """Acceptable binaries, in display order (defaults to the command itself)"""

    def __post_init__(self):
        if not self.command:
            raise ValueError("Command cannot be empty")
        aliases = _freeze(self.aliases or ()) or (self.command,)
        object.__setattr__(self, "aliases", aliases)

    def accepts(self, name: str) -> bool:
        """Check whether a binary name satisfies this dependency."""
        return name in frozenset(self.aliases)

    def to_dict(self) -> Dict[str, Any]:
        return {"command": self.command, "aliases": list(self.aliases)}


@dataclass(frozen=True)
class BuilderDescriptor:
    """Metadata for one builder."""

    output_file: str
    """Build-control file the builder generates (e.g. Makefile.PL)"""

    generator: GeneratorKind
    """Routine that produces output_file"""

    manifest: ManifestKind
    """Routine that produces the manifest"""

    instructions: Tuple[str, ...]
    """Commands to configure, build, test and install, in order"""

    dependencies: Tuple[ExternalDependency, ...] = field(default_factory=tuple)
    """Commands required on the host"""

    def __post_init__(self):
        """Validate and freeze fields after initialization."""
        if not self.output_file:
            raise ValueError("Output file cannot be empty")
        instructions = _freeze(self.instructions)
        if not instructions:
            raise ValueError("Instructions cannot be empty")
        object.__setattr__(self, "instructions", instructions)
        object.__setattr__(self, "dependencies", _freeze(self.dependencies))

    @property
    def create_method_name(self) -> str:
        return self.generator.value

    @property
    def manifest_method_name(self) -> str:
        return self.manifest.value

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert descriptor to a plain dictionary.

        Returns:
            Dictionary representation suitable for display or JSON output
        """
        return {
            "file": self.output_file,
            "build_method": self.create_method_name,
            "build_manifest": self.manifest_method_name,
            "instructions": list(self.instructions),
            "build_deps": [dep.to_dict() for dep in self.dependencies],
        }


def _freeze(items: Iterable[Any]) -> Tuple[Any, ...]:
    if isinstance(items, str):
        return (items,)
    return tuple(items)


__all__ = [
    "GeneratorKind",
    "ManifestKind",
    "ExternalDependency",
    "BuilderDescriptor",
]
