"""Event name <-> integer id lookup table."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from behaviorgen.domain.model.builtin_events import FIRST_DISCOVERED_ID


@dataclass(frozen=True, slots=True)
class IdentifierTable:
    """Bijective mapping between event names and ids.

    Ids 1..FIRST_DISCOVERED_ID-1 belong to built-in events, the rest to
    discovered ones. Derived from the registry at emission time, never
    stored.

    Attributes:
        name_to_id: Event name -> id
        id_to_name: Id -> event name, in ascending id order
        origins: Discovered event name -> artifact that declared it
    """

    name_to_id: Mapping[str, int]
    id_to_name: Mapping[int, str]
    origins: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        """Validate bijection. FAIL-FIRST."""
        if len(self.name_to_id) != len(self.id_to_name):
            raise ValueError(
                f"table sizes differ: {len(self.name_to_id)} names, {len(self.id_to_name)} ids"
            )
        for name, event_id in self.name_to_id.items():
            if self.id_to_name.get(event_id) != name:
                raise ValueError(f"'{name}' -> {event_id} has no matching reverse entry")
        for name in self.origins:
            if self.name_to_id.get(name, 0) < FIRST_DISCOVERED_ID:
                raise ValueError(f"origin recorded for non-discovered event '{name}'")

    def id_of(self, event_name: str) -> int:
        """Id assigned to event_name.

        Raises:
            KeyError: If event_name is unknown
        """
        return self.name_to_id[event_name]

    def name_of(self, event_id: int) -> str:
        """Event name bound to event_id.

        Raises:
            KeyError: If event_id is unknown
        """
        return self.id_to_name[event_id]

    @property
    def builtin_items(self) -> tuple[tuple[int, str], ...]:
        """(id, name) pairs of built-in events, ascending id."""
        return tuple(
            (event_id, name)
            for event_id, name in self.id_to_name.items()
            if event_id < FIRST_DISCOVERED_ID
        )

    @property
    def discovered_items(self) -> tuple[tuple[int, str], ...]:
        """(id, name) pairs of discovered events, ascending id."""
        return tuple(
            (event_id, name)
            for event_id, name in self.id_to_name.items()
            if event_id >= FIRST_DISCOVERED_ID
        )

    @property
    def discovered_names(self) -> tuple[str, ...]:
        """Discovered event names, ascending id."""
        return tuple(name for _, name in self.discovered_items)

    def __len__(self) -> int:
        return len(self.id_to_name)

    def __contains__(self, event_name: object) -> bool:
        return event_name in self.name_to_id
