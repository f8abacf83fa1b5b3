"""behaviorgen domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, hashlib, types, collections.abc
"""

from behaviorgen.domain.exceptions import (
    BehaviorGenError,
    ConfigurationError,
    DuplicateEventNameError,
    ParsingError,
    RegistryError,
)
from behaviorgen.domain.model import (
    BUILTIN_EVENTS,
    FIRST_DISCOVERED_ID,
    ArtifactContext,
    BuiltinEvent,
    Diagnostic,
    DiagnosticKind,
    EventHandlerRecord,
    ExtractionResult,
    GeneratedFragment,
    GenerationResult,
    GeneratorConfig,
    IdentifierTable,
    IdOrdering,
    Location,
    Severity,
    SourceArtifact,
)
from behaviorgen.domain.ports import ReporterProtocol, SymbolExtractorPort

__all__ = [
    # Exceptions
    "BehaviorGenError",
    "ConfigurationError",
    "DuplicateEventNameError",
    "ParsingError",
    "RegistryError",
    # Model
    "ArtifactContext",
    "BuiltinEvent",
    "BUILTIN_EVENTS",
    "Diagnostic",
    "DiagnosticKind",
    "EventHandlerRecord",
    "ExtractionResult",
    "FIRST_DISCOVERED_ID",
    "GeneratedFragment",
    "GenerationResult",
    "GeneratorConfig",
    "IdentifierTable",
    "IdOrdering",
    "Location",
    "Severity",
    "SourceArtifact",
    # Ports
    "ReporterProtocol",
    "SymbolExtractorPort",
]
