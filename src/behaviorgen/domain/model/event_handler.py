"""Event handler record value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from behaviorgen.domain.model.location import Location


def strip_suffix(name: str, suffix: str) -> str:
    """Remove suffix from the end of name.

    Only a trailing occurrence is removed, so "EventHandlerEventHandler"
    becomes "EventHandler".

    Args:
        name: Declared handler name
        suffix: Suffix to remove

    Returns:
        Name without suffix

    Raises:
        ValueError: If name does not end with suffix (FAIL-FIRST)
    """
    if not suffix:
        raise ValueError("suffix must not be empty")
    if not name.endswith(suffix):
        raise ValueError(f"'{name}' does not end with '{suffix}'")
    return name[: -len(suffix)]


@dataclass(frozen=True, slots=True)
class EventHandlerRecord:
    """Marked delegate declared inside a container class.

    Attributes:
        handler_name: Delegate name (e.g. JumpedEventHandler)
        event_name: handler_name without the handler suffix (e.g. Jumped)
        parameter_names: Delegate parameter names in declaration order
        location: Where the delegate is declared (not part of equality)
    """

    handler_name: str
    event_name: str
    parameter_names: tuple[str, ...] = ()
    location: Location | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.handler_name:
            raise ValueError("handler_name must not be empty")
        if not self.event_name:
            raise ValueError("event_name must not be empty")
        if not self.handler_name.startswith(self.event_name):
            raise ValueError(
                f"event_name '{self.event_name}' must prefix handler_name '{self.handler_name}'"
            )
        if len(set(self.parameter_names)) != len(self.parameter_names):
            raise ValueError(f"duplicate parameter names in {self.handler_name}")
        for param in self.parameter_names:
            if not param:
                raise ValueError(f"empty parameter name in {self.handler_name}")

    @classmethod
    def from_handler_name(
        cls,
        handler_name: str,
        suffix: str,
        parameter_names: tuple[str, ...] = (),
        location: Location | None = None,
    ) -> EventHandlerRecord:
        """Build a record, deriving event_name by stripping suffix."""
        return cls(
            handler_name=handler_name,
            event_name=strip_suffix(handler_name, suffix),
            parameter_names=parameter_names,
            location=location,
        )
