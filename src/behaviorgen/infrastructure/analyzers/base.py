"""Base utilities for syntax tree analyzers.

Analyzers work on tree-sitter nodes but only rely on the small structural
surface described by SyntaxNode, so tests can feed hand-built trees.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING, Protocol

from behaviorgen.domain.model.location import Location

if TYPE_CHECKING:
    from pathlib import Path


class SyntaxNode(Protocol):
    """Structural view of a concrete syntax tree node."""

    @property
    def type(self) -> str: ...

    @property
    def parent(self) -> SyntaxNode | None: ...

    @property
    def children(self) -> Sequence[SyntaxNode]: ...

    @property
    def text(self) -> bytes | None: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def start_point(self) -> tuple[int, int]: ...

    def child_by_field_name(self, name: str) -> SyntaxNode | None: ...


def node_text(node: SyntaxNode | None) -> str:
    """Decode node source text ("" for None or missing text)."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8")


def field_text(node: SyntaxNode, field_name: str) -> str:
    """Text of a named field child ("" if absent)."""
    return node_text(node.child_by_field_name(field_name))


def make_location(node: SyntaxNode, path: Path) -> Location:
    """Location of the first token of node."""
    return Location.from_point(path, node.start_point)


def walk(node: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield node and all descendants in document (preorder) order."""
    stack: list[SyntaxNode] = [node]

    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(current.children)))


def descendants(node: SyntaxNode, node_type: str) -> Iterator[SyntaxNode]:
    """Yield strict descendants of node with the given type, document order."""
    for child in walk(node):
        if child is not node and child.type == node_type:
            yield child


def count_errors(node: SyntaxNode) -> int:
    """Count ERROR and MISSING nodes below node."""
    errors = 0
    for child in walk(node):
        if child.type == "ERROR" or getattr(child, "is_missing", False):
            errors += 1
    return errors


def has_errors(node: SyntaxNode) -> bool:
    """Check if the subtree contains parse errors."""
    flag = getattr(node, "has_error", None)
    if flag is not None:
        return bool(flag)
    return count_errors(node) > 0
