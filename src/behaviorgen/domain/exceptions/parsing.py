"""Artifact reading and parsing exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from behaviorgen.domain.exceptions.base import BehaviorGenError

if TYPE_CHECKING:
    from pathlib import Path


class ParsingError(BehaviorGenError):
    """Source artifact could not be read or turned into a syntax tree.

    Artifact-local: the pipeline records an UNREADABLE_ARTIFACT diagnostic
    for it and generation continues with the other artifacts.

    Attributes:
        path: Offending artifact
        reason: What went wrong (non-empty)
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must not be empty")

        self.path = path
        self.reason = reason
        super().__init__(f"Cannot process {path}: {reason}")

    @property
    def artifact_id(self) -> str:
        """Artifact identity (file name) of the failed artifact."""
        return self.path.name
