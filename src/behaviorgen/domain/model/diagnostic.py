"""Generation diagnostic entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from behaviorgen.domain.model.enums import DiagnosticKind, Severity
    from behaviorgen.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Problem found while scanning or aggregating artifacts.

    Attributes:
        kind: What went wrong
        severity: ERROR/WARNING/INFO
        message: Human-readable message
        artifact_id: Artifact the diagnostic belongs to
        location: Source location, None when not tied to a declaration
        subject: Declaration name the diagnostic is about, if any
    """

    kind: DiagnosticKind
    severity: Severity
    message: str
    artifact_id: str
    location: Location | None = None
    subject: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")
        if not self.artifact_id:
            raise ValueError("artifact_id must not be empty")

    def __str__(self) -> str:
        """Format diagnostic for display."""
        where = str(self.location) if self.location is not None else self.artifact_id
        return f"[{self.severity.name}] {self.kind.name}: {self.message} ({where})"
