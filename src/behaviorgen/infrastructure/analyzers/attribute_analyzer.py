"""Attribute (annotation) analyzer."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from behaviorgen.infrastructure.analyzers.base import node_text

if TYPE_CHECKING:
    from behaviorgen.infrastructure.analyzers.base import SyntaxNode

_GENERIC_ARGS = re.compile(r"<.*>$", re.DOTALL)

# Attribute lists with these targets annotate something other than the type
_FOREIGN_TARGETS = frozenset({"return", "param", "field", "property", "method", "event"})


def resolve_attribute_class(written_name: str) -> str:
    """Resolve an attribute name as written to its class name.

    C# lets the Attribute suffix and any qualification be omitted:
        Signal                   -> SignalAttribute
        Godot.Signal             -> SignalAttribute
        global::Godot.Signal     -> SignalAttribute
        SignalAttribute          -> SignalAttribute

    Args:
        written_name: Attribute name as it appears in source

    Returns:
        Simple attribute class name
    """
    name = _GENERIC_ARGS.sub("", written_name.strip())
    name = name.rsplit("::", 1)[-1].rsplit(".", 1)[-1].strip()
    if not name:
        return ""
    if name.endswith("Attribute"):
        return name
    return f"{name}Attribute"


class AttributeAnalyzer:
    """Extracts attribute classes applied to a declaration.

    Stateless analyzer - no state between analyze() calls.
    """

    def analyze(self, declaration: SyntaxNode) -> tuple[str, ...]:
        """Resolved attribute class names on declaration, source order.

        Args:
            declaration: Declaration node (delegate, class...)

        Returns:
            Tuple of attribute class names
        """
        if declaration is None:
            raise TypeError("declaration must not be None")

        names: list[str] = []

        for child in declaration.children:
            if child.type != "attribute_list":
                continue
            if self._targets_other(child):
                continue
            for attribute in child.children:
                if attribute.type != "attribute":
                    continue
                written = node_text(attribute.child_by_field_name("name"))
                if not written:
                    written = self._first_name_child(attribute)
                resolved = resolve_attribute_class(written)
                if resolved:
                    names.append(resolved)

        return tuple(names)

    def has_marker(self, declaration: SyntaxNode, marker: str) -> bool:
        """Check if declaration carries the marker attribute class."""
        return marker in self.analyze(declaration)

    def _targets_other(self, attribute_list: SyntaxNode) -> bool:
        """Check for a [target: ...] specifier aimed away from the type."""
        for child in attribute_list.children:
            if child.type == "attribute_target_specifier":
                target = node_text(child).rstrip(":").strip()
                return target in _FOREIGN_TARGETS
        return False

    def _first_name_child(self, attribute: SyntaxNode) -> str:
        """Fallback for grammars without a name field."""
        for child in attribute.children:
            if child.type in ("identifier", "qualified_name", "generic_name", "alias_qualified_name"):
                return node_text(child)
        return ""
