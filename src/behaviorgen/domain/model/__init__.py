"""Domain model: value objects, entities and enums."""

from behaviorgen.domain.model.artifact_context import ArtifactContext
from behaviorgen.domain.model.builtin_events import (
    BUILTIN_EVENTS,
    FIRST_DISCOVERED_ID,
    BuiltinEvent,
)
from behaviorgen.domain.model.configuration import GeneratorConfig
from behaviorgen.domain.model.diagnostic import Diagnostic
from behaviorgen.domain.model.enums import DiagnosticKind, IdOrdering, Severity
from behaviorgen.domain.model.event_handler import EventHandlerRecord, strip_suffix
from behaviorgen.domain.model.fragment import GeneratedFragment, fragment_hint_name
from behaviorgen.domain.model.identifier_table import IdentifierTable
from behaviorgen.domain.model.location import Location
from behaviorgen.domain.model.results import ExtractionResult, GenerationResult
from behaviorgen.domain.model.source_artifact import SourceArtifact

__all__ = [
    # Enums
    "DiagnosticKind",
    "IdOrdering",
    "Severity",
    # Value objects
    "Location",
    "BuiltinEvent",
    "EventHandlerRecord",
    "IdentifierTable",
    "SourceArtifact",
    "GeneratedFragment",
    # Entities
    "ArtifactContext",
    "Diagnostic",
    # Results
    "ExtractionResult",
    "GenerationResult",
    # Configuration
    "GeneratorConfig",
    # Constants and helpers
    "BUILTIN_EVENTS",
    "FIRST_DISCOVERED_ID",
    "fragment_hint_name",
    "strip_suffix",
]
