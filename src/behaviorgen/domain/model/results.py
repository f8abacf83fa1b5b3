"""Extraction and generation results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from behaviorgen.domain.model.enums import Severity

if TYPE_CHECKING:
    from behaviorgen.domain.model.artifact_context import ArtifactContext
    from behaviorgen.domain.model.diagnostic import Diagnostic
    from behaviorgen.domain.model.fragment import GeneratedFragment
    from behaviorgen.domain.model.identifier_table import IdentifierTable


@dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Outcome of scanning one artifact.

    Attributes:
        artifact_id: Scanned artifact
        context: Extracted context, None when the artifact has no container
        diagnostics: Artifact-local problems
    """

    artifact_id: str
    context: ArtifactContext | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.artifact_id:
            raise ValueError("artifact_id must not be empty")
        if self.context is not None and self.context.artifact_id != self.artifact_id:
            raise ValueError(
                f"context artifact_id '{self.context.artifact_id}' != '{self.artifact_id}'"
            )

    @property
    def skipped(self) -> bool:
        """True when the artifact declares no container."""
        return self.context is None


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of one pipeline run.

    Attributes:
        fragments: One fragment per artifact with a container, input order
        diagnostics: All diagnostics of the run
        table: Identifier table the fragments were rendered with
    """

    fragments: tuple[GeneratedFragment, ...]
    diagnostics: tuple[Diagnostic, ...]
    table: IdentifierTable

    @property
    def error_count(self) -> int:
        """Number of ERROR diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARNING)

    @property
    def passed(self) -> bool:
        """True if there are no ERROR diagnostics."""
        return self.error_count == 0

    @property
    def root_fragment(self) -> GeneratedFragment | None:
        """Fragment of the root artifact, if it was part of the run."""
        for fragment in self.fragments:
            if fragment.is_root:
                return fragment
        return None
