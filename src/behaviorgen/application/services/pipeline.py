"""Generation pipeline: artifacts -> registry -> identifiers -> fragments.

Stands in for the host compiler's incremental pipeline:

1. extract every artifact (optionally on a thread pool)
2. upsert successful contexts into the registry, input order
3. flag registry entries with no live artifact (kept, not evicted)
4. assign identifiers from the full registry snapshot
5. render one fragment per live artifact with a container

Extraction failures stay local to their artifact. Only a duplicate event
name or a duplicate artifact id halts the run.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from typing import TYPE_CHECKING

import structlog

from behaviorgen.application.aggregation.registry import AggregationRegistry
from behaviorgen.application.emission.renderer import FragmentRenderer
from behaviorgen.application.identifiers.assigner import assign_identifiers
from behaviorgen.domain.exceptions.base import BehaviorGenError
from behaviorgen.domain.exceptions.generation import DuplicateArtifactError
from behaviorgen.domain.exceptions.parsing import ParsingError
from behaviorgen.domain.model.configuration import GeneratorConfig
from behaviorgen.domain.model.diagnostic import Diagnostic
from behaviorgen.domain.model.enums import DiagnosticKind, Severity
from behaviorgen.domain.model.results import ExtractionResult, GenerationResult
from behaviorgen.domain.model.source_artifact import SourceArtifact
from behaviorgen.infrastructure.adapters.cached_extractor import CachedSymbolExtractor
from behaviorgen.infrastructure.adapters.symbol_extractor import TreeSitterSymbolExtractor

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from behaviorgen.domain.model.artifact_context import ArtifactContext
    from behaviorgen.domain.model.fragment import GeneratedFragment
    from behaviorgen.domain.ports.symbol_extractor import SymbolExtractorPort

log = structlog.get_logger(__name__)


class GenerationPipeline:
    """Drives extraction, aggregation and emission.

    Keeps its registry (and the extractor cache) across run() calls, so
    repeated runs only re-parse changed artifacts. reset() is the cold
    rebuild hook.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        extractor: SymbolExtractorPort | None = None,
        registry: AggregationRegistry | None = None,
    ) -> None:
        """Initialize pipeline.

        Args:
            config: Generator configuration. Uses defaults if None.
            extractor: Symbol extractor. Defaults to a cached tree-sitter extractor.
            registry: Aggregation registry. A fresh one if None.
        """
        self._config = config or GeneratorConfig()
        self._extractor = extractor or CachedSymbolExtractor(
            TreeSitterSymbolExtractor(self._config)
        )
        self._registry = registry if registry is not None else AggregationRegistry()
        self._renderer = FragmentRenderer(self._config)

    @property
    def config(self) -> GeneratorConfig:
        """Active configuration."""
        return self._config

    @property
    def registry(self) -> AggregationRegistry:
        """Registry shared by every run of this pipeline."""
        return self._registry

    def run(self, artifacts: Sequence[SourceArtifact]) -> GenerationResult:
        """Generate fragments for artifacts.

        Args:
            artifacts: Every artifact of the current input set

        Returns:
            GenerationResult with fragments (input order) and diagnostics

        Raises:
            TypeError: If artifacts is None (FAIL-FIRST)
            DuplicateArtifactError: If two artifacts share an artifact_id
            DuplicateEventNameError: If event names collide across the registry
        """
        if artifacts is None:
            raise TypeError("artifacts must not be None")

        seen: set[str] = set()
        for artifact in artifacts:
            if artifact.artifact_id in seen:
                raise DuplicateArtifactError(artifact.artifact_id)
            seen.add(artifact.artifact_id)

        results = self._extract_all(artifacts)

        diagnostics: list[Diagnostic] = []
        live: list[ArtifactContext] = []
        for result in results:
            diagnostics.extend(result.diagnostics)
            if result.context is not None:
                live.append(result.context)

        self._registry.upsert_all(live)
        diagnostics.extend(self._stale_diagnostics({context.artifact_id for context in live}))

        snapshot = self._registry.snapshot()
        table = assign_identifiers(snapshot, self._config.id_ordering)

        fragments: list[GeneratedFragment] = [
            self._renderer.render_fragment(context, table) for context in live
        ]

        log.info(
            "generation_finished",
            artifacts=len(artifacts),
            fragments=len(fragments),
            events=len(table.discovered_names),
            diagnostics=len(diagnostics),
        )

        return GenerationResult(
            fragments=tuple(fragments),
            diagnostics=tuple(diagnostics),
            table=table,
        )

    def run_paths(self, paths: Sequence[Path]) -> GenerationResult:
        """Read paths as artifacts and run.

        Unreadable files become UNREADABLE_ARTIFACT diagnostics instead of
        aborting the run.

        Args:
            paths: Source files of the current input set

        Returns:
            GenerationResult including read diagnostics
        """
        artifacts: list[SourceArtifact] = []
        read_diagnostics: list[Diagnostic] = []

        for path in paths:
            try:
                artifacts.append(SourceArtifact.read(path))
            except ParsingError as e:
                log.warning("artifact_unreadable", artifact=e.artifact_id, reason=e.reason)
                read_diagnostics.append(_unreadable(e.artifact_id, e.reason))

        result = self.run(artifacts)
        if not read_diagnostics:
            return result
        return replace(result, diagnostics=(*read_diagnostics, *result.diagnostics))

    def reset(self) -> None:
        """Cold rebuild: forget every registry entry and cached extraction."""
        self._registry.reset()
        clear = getattr(self._extractor, "clear", None)
        if callable(clear):
            clear()

    def _extract_all(self, artifacts: Sequence[SourceArtifact]) -> list[ExtractionResult]:
        """Extract every artifact; results in input order."""
        if self._config.parallel and len(artifacts) > 1:
            with ThreadPoolExecutor(max_workers=self._config.max_workers) as executor:
                return list(executor.map(self._extract_one, artifacts))
        return [self._extract_one(artifact) for artifact in artifacts]

    def _extract_one(self, artifact: SourceArtifact) -> ExtractionResult:
        """Extract one artifact, turning extractor failures into a diagnostic."""
        try:
            return self._extractor.extract(artifact)
        except ParsingError as e:
            log.warning("artifact_unreadable", artifact=artifact.artifact_id, reason=e.reason)
            return ExtractionResult(
                artifact_id=artifact.artifact_id,
                diagnostics=(_unreadable(artifact.artifact_id, e.reason),),
            )
        except (BehaviorGenError, ValueError) as e:
            log.error("extraction_failed", artifact=artifact.artifact_id, error=str(e))
            return ExtractionResult(
                artifact_id=artifact.artifact_id,
                diagnostics=(
                    Diagnostic(
                        kind=DiagnosticKind.EXTRACTION_FAILED,
                        severity=Severity.ERROR,
                        message=str(e),
                        artifact_id=artifact.artifact_id,
                    ),
                ),
            )

    def _stale_diagnostics(self, live_ids: set[str]) -> list[Diagnostic]:
        """Report registry entries with no live container in this run."""
        stale = self._registry.stale_ids(live_ids)
        for artifact_id in stale:
            log.info("stale_registry_entry", artifact=artifact_id)
        return [
            Diagnostic(
                kind=DiagnosticKind.STALE_REGISTRY_ENTRY,
                severity=Severity.INFO,
                message="artifact no longer in input, its events are still emitted",
                artifact_id=artifact_id,
            )
            for artifact_id in stale
        ]


def _unreadable(artifact_id: str, reason: str) -> Diagnostic:
    return Diagnostic(
        kind=DiagnosticKind.UNREADABLE_ARTIFACT,
        severity=Severity.ERROR,
        message=reason,
        artifact_id=artifact_id,
    )
