"""Plain text reporter.

Stdlib-only reporter for logs and non-terminal output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from behaviorgen.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from behaviorgen.domain.model.results import GenerationResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter, one diagnostic per line."""

    def report(self, result: GenerationResult) -> str:
        """Format generation result as plain text."""
        lines = [
            f"Generated {len(result.fragments)} fragment(s), "
            f"{len(result.table.discovered_names)} custom signal(s)",
            f"Errors: {result.error_count}  Warnings: {result.warning_count}",
        ]

        for fragment in result.fragments:
            marker = " (root)" if fragment.is_root else ""
            lines.append(f"  {fragment.artifact_id} -> {fragment.hint_name}{marker}")

        if result.diagnostics:
            lines.append("")
            lines.append(f"Diagnostics ({len(result.diagnostics)}):")
            for i, diagnostic in enumerate(result.diagnostics, start=1):
                lines.append(f"{i}. {diagnostic}")

        return "\n".join(lines) + "\n"
