"""Application layer: aggregation, identifier assignment, emission, orchestration."""
