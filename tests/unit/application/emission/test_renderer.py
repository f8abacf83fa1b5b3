"""Tests for application/emission/renderer.py."""

import pytest

from behaviorgen.application.emission.renderer import FragmentRenderer
from behaviorgen.application.identifiers.assigner import assign_identifiers
from behaviorgen.domain.model.artifact_context import ArtifactContext
from behaviorgen.domain.model.configuration import GeneratorConfig
from tests.factories import make_context, make_record

FOO_EXPECTED = """\
// <auto-generated>
//     Generated by behaviorgen from Foo.cs. Do not edit.
// </auto-generated>

namespace Game.Behaviors;

public partial class Behavior
{
    private JumpedEventHandler GetJumpedEventHandler()
    {
        return (height) => OnSignal(SignalName.Jumped, height);
    }
}
"""


@pytest.fixture
def renderer() -> FragmentRenderer:
    return FragmentRenderer()


def _foo() -> ArtifactContext:
    return ArtifactContext(
        namespace_name="Game.Behaviors",
        artifact_id="Foo.cs",
        handlers=(make_record("Jumped", "height"),),
    )


class TestNonRootFragment:
    """Non-root artifacts only get factory methods."""

    def test_single_handler_exact_text(self, renderer: FragmentRenderer) -> None:
        context = _foo()
        table = assign_identifiers((context,))
        assert renderer.render(context, is_root=False, table=table) == FOO_EXPECTED

    def test_no_connect_methods(self, renderer: FragmentRenderer) -> None:
        context = _foo()
        text = renderer.render(context, is_root=False, table=assign_identifiers((context,)))
        assert "ConnectSignal" not in text
        assert "DisconnectSignal" not in text
        assert "SignalName2Id" not in text

    def test_parameterless_closure(self, renderer: FragmentRenderer) -> None:
        context = make_context("Foo.cs", "Died")
        text = renderer.render(context, is_root=False, table=assign_identifiers((context,)))
        assert "return () => OnSignal(SignalName.Died);" in text

    def test_multi_parameter_closure(self, renderer: FragmentRenderer) -> None:
        context = ArtifactContext(
            namespace_name="Game",
            artifact_id="Foo.cs",
            handlers=(make_record("Hit", "damage", "source"),),
        )
        text = renderer.render(context, is_root=False, table=assign_identifiers((context,)))
        assert "return (damage, source) => OnSignal(SignalName.Hit, damage, source);" in text

    def test_handler_missing_from_table_raises(self, renderer: FragmentRenderer) -> None:
        with pytest.raises(KeyError):
            renderer.render(_foo(), is_root=False, table=assign_identifiers(()))


class TestRootFragment:
    """The root artifact carries the global wiring."""

    def test_empty_behavior_wires_builtins_only(self, renderer: FragmentRenderer) -> None:
        context = make_context("Behavior.cs")
        text = renderer.render(context, is_root=True, table=assign_identifiers((context,)))

        assert "private void ConnectSignal(Godot.StringName signal)" in text
        assert "private void DisconnectSignal(Godot.StringName signal)" in text
        assert text.count(" += ") == 9
        assert text.count(" -= ") == 9
        assert "Get" not in text

    def test_tables_cover_ids_one_to_nine(self, renderer: FragmentRenderer) -> None:
        context = make_context("Behavior.cs")
        text = renderer.render(context, is_root=True, table=assign_identifiers((context,)))

        assert "Dictionary<string, int> SignalName2Id = new()" in text
        assert "Dictionary<int, string> SignalId2Name = new()" in text
        for event_id in range(1, 10):
            assert f"        {{ {event_id}, \"" in text
        assert "{ 10," not in text
        assert '{ "script_changed", 1 },' in text
        assert '{ 9, "child_exiting_tree" },' in text

    def test_builtin_bindings(self, renderer: FragmentRenderer) -> None:
        context = make_context("Behavior.cs")
        text = renderer.render(context, is_root=True, table=assign_identifiers((context,)))

        assert "        if (Godot.Node.SignalName.Ready.Equals(signal))" in text
        assert "Ready += () => OnSignal(Godot.Node.SignalName.Ready);" in text
        assert (
            "ChildEnteredTree += (node) => OnSignal(Godot.Node.SignalName.ChildEnteredTree, node);"
            in text
        )
        assert "ScriptChanged -= () => OnSignal(Godot.GodotObject.SignalName.ScriptChanged);" in text

    def test_tree_exiting_and_exited_dispatch_themselves(self, renderer: FragmentRenderer) -> None:
        context = make_context("Behavior.cs")
        text = renderer.render(context, is_root=True, table=assign_identifiers((context,)))

        assert "TreeExiting += () => OnSignal(Godot.Node.SignalName.TreeExiting);" in text
        assert "TreeExited += () => OnSignal(Godot.Node.SignalName.TreeExited);" in text
        assert "if (Godot.Node.SignalName.TreeExited.Equals(signal))" in text

    def test_discovered_events_from_other_artifacts(self, renderer: FragmentRenderer) -> None:
        root = make_context("Behavior.cs")
        foo = _foo()
        table = assign_identifiers((root, foo))
        text = renderer.render(root, is_root=True, table=table)

        assert "if (SignalName.Jumped.Equals(signal))" in text
        assert "Jumped += GetJumpedEventHandler();" in text
        assert "Jumped -= GetJumpedEventHandler();" in text
        assert '{ "Jumped", 10 },' in text
        assert '{ 10, "Jumped" },' in text
        # Factory lives in Foo's fragment, not the root's
        assert "private JumpedEventHandler GetJumpedEventHandler()" not in text

    def test_builtin_blocks_precede_discovered(self, renderer: FragmentRenderer) -> None:
        root = make_context("Behavior.cs", "Died")
        text = renderer.render(root, is_root=True, table=assign_identifiers((root,)))
        connect = text[text.index("ConnectSignal") : text.index("DisconnectSignal")]
        assert connect.index("ChildExitingTree") < connect.index("SignalName.Died")

    def test_member_order(self, renderer: FragmentRenderer) -> None:
        root = make_context("Behavior.cs", "Died")
        text = renderer.render(root, is_root=True, table=assign_identifiers((root,)))
        positions = [
            text.index("SignalName2Id"),
            text.index("SignalId2Name"),
            text.index("private DiedEventHandler GetDiedEventHandler()"),
            text.index("ConnectSignal"),
            text.index("DisconnectSignal"),
        ]
        assert positions == sorted(positions)


class TestRendererProperties:
    """Determinism and configuration."""

    def test_idempotent(self, renderer: FragmentRenderer) -> None:
        root = make_context("Behavior.cs", "Died")
        table = assign_identifiers((root, _foo()))
        assert renderer.render(root, True, table) == renderer.render(root, True, table)

    def test_global_namespace(self, renderer: FragmentRenderer) -> None:
        context = make_context("Foo.cs", "Died", namespace="")
        text = renderer.render(context, is_root=False, table=assign_identifiers((context,)))
        assert "namespace" not in text

    def test_custom_dispatch_method(self) -> None:
        renderer = FragmentRenderer(GeneratorConfig(dispatch_method="Emit"))
        context = make_context("Foo.cs", "Died")
        text = renderer.render(context, is_root=False, table=assign_identifiers((context,)))
        assert "return () => Emit(SignalName.Died);" in text

    def test_render_fragment_root_by_config(self, renderer: FragmentRenderer) -> None:
        root = make_context("Behavior.cs")
        fragment = renderer.render_fragment(root, assign_identifiers((root,)))
        assert fragment.is_root is True
        assert fragment.hint_name == "Behavior.g.cs"
        assert "ConnectSignal" in fragment.source

    def test_render_fragment_non_root(self, renderer: FragmentRenderer) -> None:
        foo = _foo()
        fragment = renderer.render_fragment(foo, assign_identifiers((foo,)))
        assert fragment.is_root is False
        assert fragment.hint_name == "Foo.g.cs"
