"""tree-sitter implementation of the symbol extractor port.

Two stages per artifact:
1. Syntactic filter - class declarations named like the container.
   Pure string comparison, no further analysis for anything else.
2. Semantic extraction - marked delegates nested in accepted containers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from behaviorgen.domain.model.artifact_context import ArtifactContext
from behaviorgen.domain.model.configuration import GeneratorConfig
from behaviorgen.domain.model.diagnostic import Diagnostic
from behaviorgen.domain.model.enums import DiagnosticKind, Severity
from behaviorgen.domain.model.results import ExtractionResult
from behaviorgen.domain.ports.symbol_extractor import SymbolExtractorPort
from behaviorgen.infrastructure.adapters.csharp_parser import CSharpParser
from behaviorgen.infrastructure.analyzers.base import (
    descendants,
    field_text,
    make_location,
    walk,
)
from behaviorgen.infrastructure.analyzers.delegate_analyzer import DelegateAnalyzer
from behaviorgen.infrastructure.analyzers.namespace_resolver import NamespaceResolver

if TYPE_CHECKING:
    from behaviorgen.domain.model.event_handler import EventHandlerRecord
    from behaviorgen.domain.model.source_artifact import SourceArtifact
    from behaviorgen.infrastructure.analyzers.base import SyntaxNode

log = structlog.get_logger(__name__)

CLASS_DECLARATION = "class_declaration"
DELEGATE_DECLARATION = "delegate_declaration"


class TreeSitterSymbolExtractor(SymbolExtractorPort):
    """Extracts handler records from C# artifacts.

    Stateless between extract() calls; safe to call from several threads.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        """Initialize extractor.

        Args:
            config: Generator configuration. Uses defaults if None.
        """
        self._config = config or GeneratorConfig()
        self._parser = CSharpParser()
        self._namespace_resolver = NamespaceResolver()
        self._delegate_analyzer = DelegateAnalyzer(
            self._config.marker_attribute,
            self._config.handler_suffix,
        )

    def extract(self, artifact: SourceArtifact) -> ExtractionResult:
        """Scan one artifact.

        Args:
            artifact: Source artifact

        Returns:
            ExtractionResult. context is None if no container is declared.

        Raises:
            ParsingError: If the artifact cannot be parsed at all
        """
        if artifact is None:
            raise TypeError("artifact must not be None")

        parsed = self._parser.parse(artifact)
        containers = self.select_containers(parsed.root)

        if not containers:
            return ExtractionResult(artifact_id=artifact.artifact_id)

        diagnostics: list[Diagnostic] = []
        if parsed.error_count:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.SYNTAX_ERROR,
                    severity=Severity.WARNING,
                    message=f"{parsed.error_count} syntax error(s), extraction may be partial",
                    artifact_id=artifact.artifact_id,
                )
            )

        namespace = self._resolve_namespace(artifact, containers, diagnostics)

        handlers: list[EventHandlerRecord] = []
        for container in containers:
            for delegate in descendants(container, DELEGATE_DECLARATION):
                outcome = self._delegate_analyzer.analyze(delegate, artifact.path)
                if outcome.diagnostic is not None:
                    diagnostics.append(outcome.diagnostic)
                if outcome.record is not None:
                    handlers.append(outcome.record)

        for diagnostic in diagnostics:
            if diagnostic.severity != Severity.INFO:
                log.warning(
                    "declaration_skipped",
                    artifact=artifact.artifact_id,
                    kind=diagnostic.kind.name,
                    subject=diagnostic.subject,
                    location=str(diagnostic.location) if diagnostic.location else None,
                )

        log.debug(
            "artifact_extracted",
            artifact=artifact.artifact_id,
            namespace=namespace,
            handlers=len(handlers),
        )

        return ExtractionResult(
            artifact_id=artifact.artifact_id,
            context=ArtifactContext(
                namespace_name=namespace,
                artifact_id=artifact.artifact_id,
                handlers=tuple(handlers),
            ),
            diagnostics=tuple(diagnostics),
        )

    def select_containers(self, root: SyntaxNode) -> tuple[SyntaxNode, ...]:
        """Syntactic filter: class declarations named like the container.

        Args:
            root: Syntax tree root

        Returns:
            Matching class declarations in document order. A container
            nested in another container is covered by its outer one.
        """
        return tuple(
            node
            for node in walk(root)
            if self._is_container(node) and not self._inside_container(node)
        )

    def _is_container(self, node: SyntaxNode) -> bool:
        return (
            node.type == CLASS_DECLARATION
            and field_text(node, "name") == self._config.container_name
        )

    def _inside_container(self, node: SyntaxNode) -> bool:
        ancestor = node.parent
        while ancestor is not None:
            if self._is_container(ancestor):
                return True
            ancestor = ancestor.parent
        return False

    def _resolve_namespace(
        self,
        artifact: SourceArtifact,
        containers: tuple[SyntaxNode, ...],
        diagnostics: list[Diagnostic],
    ) -> str:
        """Namespace of the first container; flag disagreeing ones."""
        namespace = self._namespace_resolver.resolve(containers[0])

        for container in containers[1:]:
            other = self._namespace_resolver.resolve(container)
            if other != namespace:
                diagnostics.append(
                    Diagnostic(
                        kind=DiagnosticKind.CONFLICTING_NAMESPACE,
                        severity=Severity.WARNING,
                        message=(
                            f"container declared in '{other or '<global>'}' but fragment "
                            f"is emitted into '{namespace or '<global>'}'"
                        ),
                        artifact_id=artifact.artifact_id,
                        location=make_location(container, artifact.path),
                        subject=self._config.container_name,
                    )
                )

        if not namespace:
            diagnostics.append(
                Diagnostic(
                    kind=DiagnosticKind.UNRESOLVED_NAMESPACE,
                    severity=Severity.INFO,
                    message="container declared outside any namespace, using global namespace",
                    artifact_id=artifact.artifact_id,
                    location=make_location(containers[0], artifact.path),
                    subject=self._config.container_name,
                )
            )

        return namespace
