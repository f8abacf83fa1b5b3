"""Event identifier assignment."""

from behaviorgen.application.identifiers.assigner import (
    assign_identifiers,
    collect_event_origins,
)

__all__ = [
    "assign_identifiers",
    "collect_event_origins",
]
