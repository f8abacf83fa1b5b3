"""Cross-artifact aggregation."""

from behaviorgen.application.aggregation.registry import AggregationRegistry

__all__ = ["AggregationRegistry"]
