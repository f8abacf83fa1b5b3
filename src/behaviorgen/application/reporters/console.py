"""Console reporter: GenerationResult -> rich formatted string."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from behaviorgen.application.reporters._base import BaseReporter
from behaviorgen.domain.model.enums import Severity

if TYPE_CHECKING:
    from behaviorgen.domain.model.diagnostic import Diagnostic
    from behaviorgen.domain.model.results import GenerationResult

_SEVERITY_STYLE = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.INFO: "dim",
}


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, width: int = 120, color: bool = True) -> None:
        """Initialize reporter.

        Args:
            width: Console width
            color: Emit ANSI styles
        """
        self._width = width
        self._color = color

    def report(self, result: GenerationResult) -> str:
        """Format generation result as rich formatted string."""
        output = StringIO()
        console = self._console(output)

        self._render_summary(console, result)
        if result.fragments:
            self._render_fragments(console, result)
        if result.diagnostics:
            self._render_diagnostics(console, result.diagnostics)

        return output.getvalue()

    def report_error(self, error: Exception) -> str:
        """Format an error that halted generation."""
        output = StringIO()
        console = self._console(output)
        console.print(f"[bold red]error:[/bold red] {escape(str(error))}")
        return output.getvalue()

    def _console(self, output: StringIO) -> Console:
        return Console(
            file=output,
            force_terminal=self._color,
            no_color=not self._color,
            width=self._width,
        )

    def _render_summary(self, console: Console, result: GenerationResult) -> None:
        status = "[green]OK[/green]" if result.passed else "[bold red]FAILED[/bold red]"
        console.print(
            f"[bold]behaviorgen[/bold] {status}: "
            f"{len(result.fragments)} fragment(s), "
            f"{len(result.table.discovered_names)} custom signal(s), "
            f"{result.error_count} error(s), {result.warning_count} warning(s)"
        )

    def _render_fragments(self, console: Console, result: GenerationResult) -> None:
        table = Table(title="Fragments", show_lines=False)
        table.add_column("Artifact")
        table.add_column("Output")
        table.add_column("Root", justify="center")

        for fragment in result.fragments:
            table.add_row(
                escape(fragment.artifact_id),
                escape(fragment.hint_name),
                "yes" if fragment.is_root else "",
            )

        console.print(table)

    def _render_diagnostics(self, console: Console, diagnostics: tuple[Diagnostic, ...]) -> None:
        table = Table(title="Diagnostics")
        table.add_column("Severity")
        table.add_column("Kind")
        table.add_column("Where")
        table.add_column("Message")

        for diagnostic in diagnostics:
            style = _SEVERITY_STYLE[diagnostic.severity]
            where = str(diagnostic.location) if diagnostic.location else diagnostic.artifact_id
            table.add_row(
                f"[{style}]{diagnostic.severity.name}[/{style}]",
                diagnostic.kind.name,
                escape(where),
                escape(diagnostic.message),
            )

        console.print(table)
