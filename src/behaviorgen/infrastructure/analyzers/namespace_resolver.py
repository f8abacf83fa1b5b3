"""Namespace resolution for type declarations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from behaviorgen.infrastructure.analyzers.base import field_text

if TYPE_CHECKING:
    from behaviorgen.infrastructure.analyzers.base import SyntaxNode

NAMESPACE_DECLARATION = "namespace_declaration"
FILE_SCOPED_NAMESPACE_DECLARATION = "file_scoped_namespace_declaration"
_NAMESPACE_TYPES = frozenset({NAMESPACE_DECLARATION, FILE_SCOPED_NAMESPACE_DECLARATION})


class NamespaceResolver:
    """Computes the fully qualified namespace a declaration lives in.

    Stateless resolver - no state between resolve() calls.

    Handles:
    - namespace A.B { class C {} }            -> "A.B"
    - namespace A { namespace B { class C {} } } -> "A.B"
    - namespace A.B; class C {}                -> "A.B"
    - class C {}                               -> ""
    """

    def resolve(self, node: SyntaxNode) -> str:
        """Resolve the namespace enclosing node.

        Args:
            node: Declaration node (class, struct, delegate...)

        Returns:
            Dotted namespace, outermost first. "" for the global namespace.

        Raises:
            TypeError: If node is None (FAIL-FIRST)
        """
        if node is None:
            raise TypeError("node must not be None")

        parts: list[str] = []
        root = node

        # Walk outward; classes and declaration lists between namespaces are skipped
        ancestor = node.parent
        while ancestor is not None:
            if ancestor.type in _NAMESPACE_TYPES:
                name = field_text(ancestor, "name")
                if name:
                    parts.append(name)
            root = ancestor
            ancestor = ancestor.parent

        if not parts:
            sibling = self._preceding_file_scoped_namespace(root, node)
            if sibling is not None:
                parts.append(field_text(sibling, "name"))

        return ".".join(reversed(parts))

    def _preceding_file_scoped_namespace(
        self,
        root: SyntaxNode,
        node: SyntaxNode,
    ) -> SyntaxNode | None:
        """Find a file scoped namespace emitted as a sibling before node.

        Newer grammars put `namespace X;` next to the declarations it
        scopes rather than around them.
        """
        found: SyntaxNode | None = None
        for child in root.children:
            if child.start_byte >= node.start_byte:
                break
            if child.type == FILE_SCOPED_NAMESPACE_DECLARATION and field_text(child, "name"):
                found = child
        return found
