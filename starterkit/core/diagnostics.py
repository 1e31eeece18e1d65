"""
Advisory diagnostics emitted by registry queries.

A diagnostic travels alongside a best-effort result instead of aborting
the caller. Every diagnostic is also logged at WARNING level by the code
that creates it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from starterkit.core.exceptions import (
    BuilderError,
    MutuallyExclusiveBuildersError,
    UnknownBuilderError,
)


class DiagnosticKind(Enum):
    """Kinds of advisory diagnostics."""

    UNKNOWN_BUILDER = "unknown-builder"
    MUTUALLY_EXCLUSIVE = "mutually-exclusive-builders"


@dataclass(frozen=True)
class Diagnostic:
    """A single advisory message."""

    kind: DiagnosticKind
    builder: str
    winner: Optional[str] = None  # set for MUTUALLY_EXCLUSIVE only

    @classmethod
    def unknown_builder(cls, builder: str) -> "Diagnostic":
        return cls(DiagnosticKind.UNKNOWN_BUILDER, builder)

    @classmethod
    def mutually_exclusive(cls, builder: str, winner: str) -> "Diagnostic":
        return cls(DiagnosticKind.MUTUALLY_EXCLUSIVE, builder, winner)

    @property
    def message(self) -> str:
        """Human-readable text, identical to the matching exception message."""
        return str(self.to_exception())

    def to_exception(self) -> BuilderError:
        """
        Convert the diagnostic into its exception counterpart.

        Useful for callers that want to escalate advisories into errors.
        """
        if self.kind is DiagnosticKind.MUTUALLY_EXCLUSIVE:
            return MutuallyExclusiveBuildersError(self.builder, self.winner or "")
        return UnknownBuilderError(self.builder)

    def __str__(self) -> str:
        return self.message
