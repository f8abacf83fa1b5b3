"""Domain enumerations."""

from enum import Enum, auto


class Severity(Enum):
    """Diagnostic severity."""

    ERROR = auto()  # generation fails
    WARNING = auto()  # declaration skipped, generation continues
    INFO = auto()  # informational


class DiagnosticKind(Enum):
    """What went wrong while scanning an artifact."""

    MALFORMED_DECLARATION = auto()  # marked delegate without the handler suffix
    UNRESOLVED_SYMBOL = auto()  # delegate could not be resolved
    UNRESOLVED_NAMESPACE = auto()  # container declared in the global namespace
    CONFLICTING_NAMESPACE = auto()  # containers of one artifact disagree
    SYNTAX_ERROR = auto()  # artifact has parse errors
    UNREADABLE_ARTIFACT = auto()  # artifact could not be read or parsed
    EXTRACTION_FAILED = auto()  # extractor raised on an artifact
    STALE_REGISTRY_ENTRY = auto()  # registry entry with no matching artifact


class IdOrdering(Enum):
    """How discovered event names are ordered before ids are assigned.

    SORTED: lexicographic, independent of scan order.
    DISCOVERY: registry iteration order, then declaration order.
    """

    SORTED = "sorted"
    DISCOVERY = "discovery"
