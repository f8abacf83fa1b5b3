"""Delegate declaration analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from behaviorgen.domain.model.diagnostic import Diagnostic
from behaviorgen.domain.model.enums import DiagnosticKind, Severity
from behaviorgen.domain.model.event_handler import EventHandlerRecord
from behaviorgen.infrastructure.analyzers.attribute_analyzer import AttributeAnalyzer
from behaviorgen.infrastructure.analyzers.base import (
    field_text,
    has_errors,
    make_location,
    node_text,
)

if TYPE_CHECKING:
    from pathlib import Path

    from behaviorgen.domain.model.location import Location
    from behaviorgen.infrastructure.analyzers.base import SyntaxNode

_PARAMETER_TYPES = frozenset({"parameter", "parameter_array"})


@dataclass(frozen=True, slots=True)
class DelegateOutcome:
    """Result of analyzing one delegate.

    Exactly one of record/diagnostic is set, or neither when the delegate
    is simply not marked.
    """

    record: EventHandlerRecord | None = None
    diagnostic: Diagnostic | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.record is not None and self.diagnostic is not None:
            raise ValueError("outcome cannot carry both a record and a diagnostic")


_IGNORED = DelegateOutcome()


class DelegateAnalyzer:
    """Turns marked delegate declarations into EventHandlerRecords.

    Stateless analyzer - no state between analyze() calls.
    """

    def __init__(self, marker_attribute: str, handler_suffix: str) -> None:
        """Initialize analyzer.

        Args:
            marker_attribute: Attribute class that marks handler delegates
            handler_suffix: Required name suffix

        Raises:
            ValueError: If either argument is empty (FAIL-FIRST)
        """
        if not marker_attribute:
            raise ValueError("marker_attribute must not be empty")
        if not handler_suffix:
            raise ValueError("handler_suffix must not be empty")

        self._marker = marker_attribute
        self._suffix = handler_suffix
        self._attribute_analyzer = AttributeAnalyzer()

    def analyze(self, node: SyntaxNode, path: Path) -> DelegateOutcome:
        """Analyze one delegate_declaration node.

        Args:
            node: delegate_declaration node
            path: Source file path

        Returns:
            DelegateOutcome with a record, a diagnostic, or neither
        """
        if node is None:
            raise TypeError("node must not be None")
        if path is None:
            raise TypeError("path must not be None")

        location = make_location(node, path)
        name = field_text(node, "name")

        if not self._attribute_analyzer.has_marker(node, self._marker):
            return _IGNORED

        parameters = node.child_by_field_name("parameters")
        if not name or parameters is None or has_errors(node):
            return self._unresolved(path, location, name, "delegate declaration could not be resolved")

        if not name.endswith(self._suffix) or name == self._suffix:
            return self._malformed(
                path,
                location,
                name,
                f"[{self._marker.removesuffix('Attribute')}] delegate '{name}' "
                f"must be named <Event>{self._suffix}",
            )

        parameter_names = self._parameter_names(parameters)
        if "" in parameter_names:
            return self._unresolved(path, location, name, f"parameter of '{name}' has no name")

        repeated = _first_repeated(parameter_names)
        if repeated is not None:
            return self._malformed(
                path, location, name, f"delegate '{name}' declares parameter '{repeated}' twice"
            )

        return DelegateOutcome(
            record=EventHandlerRecord.from_handler_name(
                name,
                self._suffix,
                parameter_names=parameter_names,
                location=location,
            )
        )

    def _unresolved(
        self, path: Path, location: Location, name: str, reason: str
    ) -> DelegateOutcome:
        return DelegateOutcome(
            diagnostic=Diagnostic(
                kind=DiagnosticKind.UNRESOLVED_SYMBOL,
                severity=Severity.WARNING,
                message=f"{reason}, skipped",
                artifact_id=path.name,
                location=location,
                subject=name or None,
            )
        )

    def _malformed(
        self, path: Path, location: Location, name: str, reason: str
    ) -> DelegateOutcome:
        return DelegateOutcome(
            diagnostic=Diagnostic(
                kind=DiagnosticKind.MALFORMED_DECLARATION,
                severity=Severity.WARNING,
                message=f"{reason}, skipped",
                artifact_id=path.name,
                location=location,
                subject=name,
            )
        )

    def _parameter_names(self, parameter_list: SyntaxNode) -> tuple[str, ...]:
        """Parameter names in declaration order, "" where a name is missing."""
        names: list[str] = []

        for child in parameter_list.children:
            if child.type not in _PARAMETER_TYPES:
                continue
            name = field_text(child, "name")
            if not name:
                # parameter_array in older grammars has no name field
                identifiers = [c for c in child.children if c.type == "identifier"]
                name = node_text(identifiers[-1]) if identifiers else ""
            names.append(name)

        return tuple(names)


def _first_repeated(names: tuple[str, ...]) -> str | None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            return name
        seen.add(name)
    return None
