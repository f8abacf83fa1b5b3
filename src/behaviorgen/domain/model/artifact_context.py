"""Per-artifact extraction result."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from behaviorgen.domain.model.event_handler import EventHandlerRecord


@dataclass(frozen=True, slots=True)
class ArtifactContext:
    """Everything one artifact contributes to generation.

    Replaced as a whole each time its artifact is rescanned, never patched.

    Attributes:
        namespace_name: Dotted namespace of the container ("" = global)
        artifact_id: Stable artifact identity (source file name)
        handlers: Marked handlers in declaration order (may be empty)
    """

    namespace_name: str
    artifact_id: str
    handlers: tuple[EventHandlerRecord, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.namespace_name is None:
            raise TypeError("namespace_name must not be None (use '' for global)")
        if not self.artifact_id:
            raise ValueError("artifact_id must not be empty")

    @property
    def event_names(self) -> tuple[str, ...]:
        """Event names in declaration order."""
        return tuple(handler.event_name for handler in self.handlers)
