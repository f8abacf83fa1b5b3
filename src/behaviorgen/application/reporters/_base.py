"""Shared reporter behaviour."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from behaviorgen.domain.model.results import GenerationResult


class BaseReporter(ABC):
    """Abstract ReporterProtocol implementation.

    Subclasses render GenerationResult; halting errors default to a single
    "error: ..." line.
    """

    @abstractmethod
    def report(self, result: GenerationResult) -> str:
        """Render a finished run.

        Args:
            result: Fragments, diagnostics and identifier table of the run

        Returns:
            Report text, newline terminated
        """

    def report_error(self, error: Exception) -> str:
        """Render an error that stopped the run."""
        return f"error: {error}\n"
