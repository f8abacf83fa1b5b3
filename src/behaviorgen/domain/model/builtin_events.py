"""Built-in Godot signals every Behavior binds.

The ids 1-9 are fixed and never reassigned. Discovered events start at
FIRST_DISCOVERED_ID.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BuiltinEvent:
    """Signal provided by the Godot runtime.

    Attributes:
        event_id: Fixed identifier (1-9)
        key: Signal name used in the lookup tables (snake_case)
        owner: Class exposing the SignalName constant
        member: C# event member name
        parameters: Parameters forwarded to the dispatch entry point
    """

    event_id: int
    key: str
    owner: str
    member: str
    parameters: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.event_id <= 0:
            raise ValueError(f"event_id must be > 0, got {self.event_id}")
        if not self.key:
            raise ValueError("key must not be empty")
        if not self.owner:
            raise ValueError("owner must not be empty")
        if not self.member:
            raise ValueError("member must not be empty")

    @property
    def signal_constant(self) -> str:
        """Fully qualified SignalName constant, e.g. Godot.Node.SignalName.Ready."""
        return f"{self.owner}.SignalName.{self.member}"


_OBJECT = "Godot.GodotObject"
_NODE = "Godot.Node"

BUILTIN_EVENTS: tuple[BuiltinEvent, ...] = (
    BuiltinEvent(1, "script_changed", _OBJECT, "ScriptChanged"),
    BuiltinEvent(2, "property_list_changed", _OBJECT, "PropertyListChanged"),
    BuiltinEvent(3, "ready", _NODE, "Ready"),
    BuiltinEvent(4, "renamed", _NODE, "Renamed"),
    BuiltinEvent(5, "tree_entered", _NODE, "TreeEntered"),
    BuiltinEvent(6, "tree_exiting", _NODE, "TreeExiting"),
    BuiltinEvent(7, "tree_exited", _NODE, "TreeExited"),
    BuiltinEvent(8, "child_entered_tree", _NODE, "ChildEnteredTree", ("node",)),
    BuiltinEvent(9, "child_exiting_tree", _NODE, "ChildExitingTree", ("node",)),
)

FIRST_DISCOVERED_ID = len(BUILTIN_EVENTS) + 1
