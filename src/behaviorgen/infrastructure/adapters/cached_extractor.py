"""Cached symbol extractor adapter.

Decorator pattern: wraps SymbolExtractorPort with content-hash based caching.
This is what makes repeated pipeline runs incremental.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from behaviorgen.domain.ports.symbol_extractor import SymbolExtractorPort

if TYPE_CHECKING:
    from behaviorgen.domain.model.results import ExtractionResult
    from behaviorgen.domain.model.source_artifact import SourceArtifact


@dataclass
class CachedSymbolExtractor(SymbolExtractorPort):
    """Extractor with content-hash based caching.

    Decorator pattern: wraps another SymbolExtractorPort.
    Uses SHA-256 hash of artifact content for cache invalidation.

    Cache is in-memory only - no persistence between processes.
    Failed extractions are never cached.

    Attributes:
        _inner: Wrapped extractor implementation
        _cache: artifact_id -> (content_hash, ExtractionResult) mapping
    """

    _inner: SymbolExtractorPort
    _cache: dict[str, tuple[str, ExtractionResult]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)
    _hits: int = 0
    _misses: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self._inner is None:
            raise TypeError("_inner extractor must not be None")

    def extract(self, artifact: SourceArtifact) -> ExtractionResult:
        """Extract with cache lookup.

        Cache hit: return cached result if content hash matches.
        Cache miss: extract with inner extractor, cache result.

        Raises:
            ParsingError: If the artifact cannot be parsed
        """
        content_hash = artifact.content_hash

        with self._lock:
            cached = self._cache.get(artifact.artifact_id)
            if cached is not None and cached[0] == content_hash:
                self._hits += 1
                return cached[1]

        # Extract outside the lock so independent artifacts run concurrently
        result = self._inner.extract(artifact)

        with self._lock:
            self._misses += 1
            self._cache[artifact.artifact_id] = (content_hash, result)
        return result

    def invalidate(self, artifact_id: str) -> None:
        """Explicitly invalidate cache entry.

        Args:
            artifact_id: Artifact to invalidate
        """
        with self._lock:
            self._cache.pop(artifact_id, None)

    def clear(self) -> None:
        """Clear entire cache."""
        with self._lock:
            self._cache.clear()
            self._hits = 0
            self._misses = 0

    @property
    def cache_size(self) -> int:
        """Number of cached artifacts."""
        with self._lock:
            return len(self._cache)

    @property
    def hits(self) -> int:
        """Cache hits since creation or last clear()."""
        with self._lock:
            return self._hits

    @property
    def misses(self) -> int:
        """Cache misses since creation or last clear()."""
        with self._lock:
            return self._misses
