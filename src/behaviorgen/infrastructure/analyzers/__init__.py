"""Syntax tree analyzers for C# declarations."""

from behaviorgen.infrastructure.analyzers.attribute_analyzer import (
    AttributeAnalyzer,
    resolve_attribute_class,
)
from behaviorgen.infrastructure.analyzers.delegate_analyzer import (
    DelegateAnalyzer,
    DelegateOutcome,
)
from behaviorgen.infrastructure.analyzers.namespace_resolver import NamespaceResolver

__all__ = [
    "AttributeAnalyzer",
    "DelegateAnalyzer",
    "DelegateOutcome",
    "NamespaceResolver",
    "resolve_attribute_class",
]
