"""Tests for infrastructure/analyzers/namespace_resolver.py."""

import pytest

from behaviorgen.infrastructure.analyzers.base import SyntaxNode, field_text, walk
from behaviorgen.infrastructure.analyzers.namespace_resolver import NamespaceResolver
from tests.factories import FakeNode, fake_identifier, first_of_type, parse_root


@pytest.fixture
def resolver() -> NamespaceResolver:
    return NamespaceResolver()


def _behavior_class(source: str) -> SyntaxNode:
    return first_of_type(parse_root(source), "class_declaration")


class TestNamespaceResolverParsed:
    """Resolution on real tree-sitter trees."""

    def test_block_namespace(self, resolver: NamespaceResolver) -> None:
        node = _behavior_class("namespace Game.Actors { public partial class Behavior {} }")
        assert resolver.resolve(node) == "Game.Actors"

    def test_nested_block_namespaces(self, resolver: NamespaceResolver) -> None:
        node = _behavior_class(
            "namespace Game { namespace Actors { public partial class Behavior {} } }"
        )
        assert resolver.resolve(node) == "Game.Actors"

    def test_file_scoped_namespace(self, resolver: NamespaceResolver) -> None:
        node = _behavior_class("using Godot;\nnamespace Game.Actors;\npublic partial class Behavior {}\n")
        assert resolver.resolve(node) == "Game.Actors"

    def test_global_namespace(self, resolver: NamespaceResolver) -> None:
        node = _behavior_class("public partial class Behavior {}")
        assert resolver.resolve(node) == ""

    def test_class_in_class_uses_outer_namespace(self, resolver: NamespaceResolver) -> None:
        root = parse_root("namespace Game { class Outer { public partial class Behavior {} } }")
        behavior = next(
            node
            for node in walk(root)
            if node.type == "class_declaration" and field_text(node, "name") == "Behavior"
        )
        assert resolver.resolve(behavior) == "Game"


class TestNamespaceResolverSiblings:
    """File scoped namespaces emitted as siblings of the declarations."""

    def test_preceding_sibling_namespace(self, resolver: NamespaceResolver) -> None:
        namespace = FakeNode(
            "file_scoped_namespace_declaration",
            fields={"name": fake_identifier("Game")},
            start_byte=0,
        )
        cls = FakeNode("class_declaration", start_byte=20)
        FakeNode("compilation_unit", children=[namespace, cls])
        assert resolver.resolve(cls) == "Game"

    def test_following_sibling_ignored(self, resolver: NamespaceResolver) -> None:
        cls = FakeNode("class_declaration", start_byte=0)
        namespace = FakeNode(
            "file_scoped_namespace_declaration",
            fields={"name": fake_identifier("Game")},
            start_byte=40,
        )
        FakeNode("compilation_unit", children=[cls, namespace])
        assert resolver.resolve(cls) == ""

    def test_none_raises(self, resolver: NamespaceResolver) -> None:
        with pytest.raises(TypeError, match="node must not be None"):
            resolver.resolve(None)  # type: ignore[arg-type]
