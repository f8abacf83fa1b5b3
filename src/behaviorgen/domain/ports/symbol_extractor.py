"""Symbol extractor port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from behaviorgen.domain.model.results import ExtractionResult
    from behaviorgen.domain.model.source_artifact import SourceArtifact


class SymbolExtractorPort(ABC):
    """Port for extracting handler records from one artifact.

    Infrastructure layer must provide implementation.
    Implementations must be pure per artifact: no reads of other artifacts,
    no writes to shared state.
    """

    @abstractmethod
    def extract(self, artifact: SourceArtifact) -> ExtractionResult:
        """Scan one artifact.

        Args:
            artifact: Source artifact

        Returns:
            ExtractionResult. context is None if the artifact has no container.

        Raises:
            ParsingError: If the artifact cannot be parsed at all
        """
        ...
