"""Aggregation registry of per-artifact contexts."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from behaviorgen.domain.exceptions.generation import RegistryError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from behaviorgen.domain.model.artifact_context import ArtifactContext


class AggregationRegistry:
    """Process-wide artifact_id -> ArtifactContext store.

    Couples the per-artifact extraction stage to the global emission of the
    root fragment. Semantics:

    - upsert() inserts or replaces; a replaced entry keeps the position of
      its first insertion (discovery order).
    - Entries are never deleted by upsert(). An artifact that disappears
      from the input keeps its entry until reset() (stale entry).
    - upsert() and snapshot() are mutually exclusive, so a snapshot never
      observes a half-applied update.

    Owned explicitly by whoever drives generation and passed by reference
    to the stages that need it.
    """

    def __init__(self) -> None:
        self._contexts: dict[str, ArtifactContext] = {}
        self._lock = threading.Lock()

    def upsert(self, artifact_id: str, context: ArtifactContext) -> None:
        """Insert or replace the context of one artifact.

        Args:
            artifact_id: Artifact identity
            context: Full extraction result for that artifact

        Raises:
            TypeError: If context is None (FAIL-FIRST)
            RegistryError: If artifact_id does not match context.artifact_id
        """
        if context is None:
            raise TypeError("context must not be None")
        if not artifact_id:
            raise RegistryError(artifact_id, "artifact_id must not be empty")
        if context.artifact_id != artifact_id:
            raise RegistryError(
                artifact_id, f"context belongs to '{context.artifact_id}'"
            )

        with self._lock:
            self._contexts[artifact_id] = context

    def upsert_all(self, contexts: Iterable[ArtifactContext]) -> None:
        """Upsert several contexts atomically, in iteration order."""
        batch = list(contexts)
        for context in batch:
            if context is None:
                raise TypeError("context must not be None")

        with self._lock:
            for context in batch:
                self._contexts[context.artifact_id] = context

    def snapshot(self) -> tuple[ArtifactContext, ...]:
        """All current contexts in discovery order."""
        with self._lock:
            return tuple(self._contexts.values())

    def get(self, artifact_id: str) -> ArtifactContext | None:
        """Current context of artifact_id, if any."""
        with self._lock:
            return self._contexts.get(artifact_id)

    def artifact_ids(self) -> tuple[str, ...]:
        """Registered artifact ids in discovery order."""
        with self._lock:
            return tuple(self._contexts)

    def stale_ids(self, live_ids: Iterable[str]) -> tuple[str, ...]:
        """Registered ids absent from live_ids (not removed)."""
        live = frozenset(live_ids)
        return tuple(artifact_id for artifact_id in self.artifact_ids() if artifact_id not in live)

    def reset(self) -> None:
        """Drop every entry. Cold rebuilds only."""
        with self._lock:
            self._contexts.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._contexts)

    def __contains__(self, artifact_id: object) -> bool:
        with self._lock:
            return artifact_id in self._contexts
