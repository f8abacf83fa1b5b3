"""Reporter port: how a generation outcome is presented."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from behaviorgen.domain.model.results import GenerationResult


class ReporterProtocol(Protocol):
    """Turns generation outcomes into text.

    Implementations return strings and never print; the caller owns the
    stream. Shipped implementations: ConsoleReporter (rich) and
    PlainTextReporter.
    """

    def report(self, result: GenerationResult) -> str:
        """Render a finished run (fragments, diagnostics, custom signal count)."""
        ...

    def report_error(self, error: Exception) -> str:
        """Render an error that stopped the run before a result existed."""
        ...
