"""Fragment renderer: ArtifactContext + IdentifierTable -> C# source."""

from __future__ import annotations

from typing import TYPE_CHECKING

from behaviorgen.application.emission.templates import (
    BUILTIN_BINDING,
    DISCOVERED_BINDING,
    FACTORY,
    LOOKUP_TABLE,
    SIGNAL_METHOD,
    TABLE_ENTRY,
    FragmentBuilder,
    csharp_string,
    forwarded_arguments,
)
from behaviorgen.domain.model.builtin_events import BUILTIN_EVENTS
from behaviorgen.domain.model.configuration import GeneratorConfig
from behaviorgen.domain.model.fragment import GeneratedFragment, fragment_hint_name

if TYPE_CHECKING:
    from collections.abc import Sequence

    from behaviorgen.domain.model.artifact_context import ArtifactContext
    from behaviorgen.domain.model.builtin_events import BuiltinEvent
    from behaviorgen.domain.model.event_handler import EventHandlerRecord
    from behaviorgen.domain.model.identifier_table import IdentifierTable

CONNECT_METHOD = "ConnectSignal"
DISCONNECT_METHOD = "DisconnectSignal"
NAME_TO_ID_TABLE = "SignalName2Id"
ID_TO_NAME_TABLE = "SignalId2Name"


class FragmentRenderer:
    """Renders the companion fragment of one artifact.

    Pure: same (context, is_root, table) always gives the same text.

    Every fragment gets one factory method per handler of its own
    artifact. The root fragment additionally gets the lookup tables and
    ConnectSignal/DisconnectSignal covering every built-in event and every
    event in the table, i.e. the global registry state.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        builtins: Sequence[BuiltinEvent] = BUILTIN_EVENTS,
    ) -> None:
        """Initialize renderer.

        Args:
            config: Generator configuration. Uses defaults if None.
            builtins: Built-in events bound by the root fragment
        """
        self._config = config or GeneratorConfig()
        self._builtins = tuple(builtins)

    def render(self, context: ArtifactContext, is_root: bool, table: IdentifierTable) -> str:
        """Render fragment source text.

        Args:
            context: Artifact to render
            is_root: Emit tables and connect/disconnect methods
            table: Identifier table of the current registry snapshot

        Returns:
            C# source text

        Raises:
            TypeError: If context or table is None (FAIL-FIRST)
            KeyError: If a handler of context is missing from table
        """
        if context is None:
            raise TypeError("context must not be None")
        if table is None:
            raise TypeError("table must not be None")

        for handler in context.handlers:
            # Fragment and table must come from the same snapshot
            table.id_of(handler.event_name)

        builder = FragmentBuilder(
            artifact_id=context.artifact_id,
            namespace=context.namespace_name,
            container=self._config.container_name,
        )

        if is_root:
            builder.add_field(self._render_name_to_id(table))
            builder.add_field(self._render_id_to_name(table))

        for handler in context.handlers:
            builder.add_factory(self._render_factory(handler))

        if is_root:
            builder.add_method(self._render_signal_method(CONNECT_METHOD, "+=", table))
            builder.add_method(self._render_signal_method(DISCONNECT_METHOD, "-=", table))

        return builder.build()

    def render_fragment(
        self,
        context: ArtifactContext,
        table: IdentifierTable,
    ) -> GeneratedFragment:
        """Render and wrap as a GeneratedFragment, root decided by config."""
        is_root = self._config.is_root(context.artifact_id)
        return GeneratedFragment(
            artifact_id=context.artifact_id,
            hint_name=fragment_hint_name(context.artifact_id, self._config.generated_suffix),
            source=self.render(context, is_root, table),
            is_root=is_root,
        )

    def _render_factory(self, handler: EventHandlerRecord) -> str:
        """Factory method returning a closure that routes to dispatch."""
        return FACTORY.substitute(
            handler=handler.handler_name,
            params=", ".join(handler.parameter_names),
            dispatch=self._config.dispatch_method,
            event=handler.event_name,
            arguments=forwarded_arguments(handler.parameter_names),
        )

    def _render_signal_method(self, method: str, operator: str, table: IdentifierTable) -> str:
        """ConnectSignal/DisconnectSignal: built-in blocks, then discovered."""
        blocks = [
            BUILTIN_BINDING.substitute(
                constant=event.signal_constant,
                member=event.member,
                operator=operator,
                params=", ".join(event.parameters),
                dispatch=self._config.dispatch_method,
                arguments=forwarded_arguments(event.parameters),
            )
            for event in self._builtins
        ]
        blocks.extend(
            DISCOVERED_BINDING.substitute(
                event=name,
                operator=operator,
                handler=f"{name}{self._config.handler_suffix}",
            )
            for name in table.discovered_names
        )
        return SIGNAL_METHOD.substitute(method=method, blocks="\n\n".join(blocks))

    def _render_name_to_id(self, table: IdentifierTable) -> str:
        entries = [
            TABLE_ENTRY.substitute(key=csharp_string(name), value=event_id)
            for event_id, name in table.id_to_name.items()
        ]
        return LOOKUP_TABLE.substitute(
            key_type="string",
            value_type="int",
            name=NAME_TO_ID_TABLE,
            entries="\n".join(entries),
        )

    def _render_id_to_name(self, table: IdentifierTable) -> str:
        entries = [
            TABLE_ENTRY.substitute(key=event_id, value=csharp_string(name))
            for event_id, name in table.id_to_name.items()
        ]
        return LOOKUP_TABLE.substitute(
            key_type="int",
            value_type="string",
            name=ID_TO_NAME_TABLE,
            entries="\n".join(entries),
        )
