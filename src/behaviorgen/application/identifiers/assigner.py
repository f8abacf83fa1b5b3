"""Identifier assignment for event names.

Ids 1-9 are the fixed built-in block. Discovered events take ids from 10
upward, either in sorted order (default) or in registry discovery order.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from behaviorgen.domain.exceptions.generation import DuplicateEventNameError
from behaviorgen.domain.model.builtin_events import BUILTIN_EVENTS, FIRST_DISCOVERED_ID
from behaviorgen.domain.model.enums import IdOrdering
from behaviorgen.domain.model.identifier_table import IdentifierTable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from behaviorgen.domain.model.artifact_context import ArtifactContext
    from behaviorgen.domain.model.builtin_events import BuiltinEvent


def collect_event_origins(
    snapshot: Sequence[ArtifactContext],
    builtins: Sequence[BuiltinEvent] = BUILTIN_EVENTS,
) -> dict[str, str]:
    """Map each discovered event name to its declaring artifact.

    Walks artifacts in snapshot order, handlers in declaration order.

    Args:
        snapshot: Registry snapshot
        builtins: Built-in events whose names are reserved

    Returns:
        event_name -> artifact_id, discovery order

    Raises:
        DuplicateEventNameError: If an event name is declared twice, or
            shadows a built-in event
    """
    reserved = {event.key: "<builtin>" for event in builtins}
    origins: dict[str, str] = {}

    for context in snapshot:
        for handler in context.handlers:
            name = handler.event_name
            if name in reserved:
                raise DuplicateEventNameError(name, reserved[name], context.artifact_id)
            if name in origins:
                raise DuplicateEventNameError(name, origins[name], context.artifact_id)
            origins[name] = context.artifact_id

    return origins


def assign_identifiers(
    snapshot: Sequence[ArtifactContext],
    ordering: IdOrdering = IdOrdering.SORTED,
    builtins: Sequence[BuiltinEvent] = BUILTIN_EVENTS,
) -> IdentifierTable:
    """Build the identifier table for a registry snapshot.

    Args:
        snapshot: Registry snapshot, discovery order
        ordering: SORTED (scan-order independent) or DISCOVERY
        builtins: Fixed built-in block

    Returns:
        IdentifierTable covering built-in and discovered events

    Raises:
        TypeError: If snapshot is None (FAIL-FIRST)
        DuplicateEventNameError: If an event name is not unique
    """
    if snapshot is None:
        raise TypeError("snapshot must not be None")

    name_to_id: dict[str, int] = {}
    id_to_name: dict[int, str] = {}

    for event in builtins:
        name_to_id[event.key] = event.event_id
        id_to_name[event.event_id] = event.key

    origins = collect_event_origins(snapshot, builtins)

    match ordering:
        case IdOrdering.SORTED:
            names = sorted(origins)
        case IdOrdering.DISCOVERY:
            names = list(origins)

    for offset, name in enumerate(names):
        event_id = FIRST_DISCOVERED_ID + offset
        name_to_id[name] = event_id
        id_to_name[event_id] = name

    return IdentifierTable(
        name_to_id=MappingProxyType(name_to_id),
        id_to_name=MappingProxyType(dict(sorted(id_to_name.items()))),
        origins=MappingProxyType({name: origins[name] for name in names}),
    )
