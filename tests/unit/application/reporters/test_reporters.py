"""Tests for application/reporters."""

from pathlib import Path

import pytest

from behaviorgen.application.identifiers.assigner import assign_identifiers
from behaviorgen.application.reporters.console import ConsoleReporter
from behaviorgen.application.reporters.plain_text import PlainTextReporter
from behaviorgen.domain.exceptions.generation import DuplicateEventNameError
from behaviorgen.domain.model.diagnostic import Diagnostic
from behaviorgen.domain.model.enums import DiagnosticKind, Severity
from behaviorgen.domain.model.fragment import GeneratedFragment
from behaviorgen.domain.model.location import Location
from behaviorgen.domain.model.results import GenerationResult
from tests.factories import make_context


@pytest.fixture
def result() -> GenerationResult:
    table = assign_identifiers((make_context("Behavior.cs"), make_context("Foo.cs", "Jumped")))
    return GenerationResult(
        fragments=(
            GeneratedFragment("Behavior.cs", "Behavior.g.cs", "", is_root=True),
            GeneratedFragment("Foo.cs", "Foo.g.cs", ""),
        ),
        diagnostics=(
            Diagnostic(
                DiagnosticKind.MALFORMED_DECLARATION,
                Severity.WARNING,
                "[Signal] delegate 'Landed' must be named <Event>EventHandler, skipped",
                "Foo.cs",
                location=Location(Path("Foo.cs"), 9, 4),
                subject="Landed",
            ),
        ),
        table=table,
    )


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_summary(self, result: GenerationResult) -> None:
        text = PlainTextReporter().report(result)
        lines = text.splitlines()
        assert lines[0] == "Generated 2 fragment(s), 1 custom signal(s)"
        assert lines[1] == "Errors: 0  Warnings: 1"

    def test_fragments_listed(self, result: GenerationResult) -> None:
        text = PlainTextReporter().report(result)
        assert "  Behavior.cs -> Behavior.g.cs (root)" in text
        assert "  Foo.cs -> Foo.g.cs\n" in text

    def test_diagnostics_numbered(self, result: GenerationResult) -> None:
        text = PlainTextReporter().report(result)
        assert "Diagnostics (1):" in text
        assert "1. [WARNING] MALFORMED_DECLARATION:" in text
        assert "(Foo.cs:9:4)" in text

    def test_report_error(self) -> None:
        error = DuplicateEventNameError("Jumped", "A.cs", "B.cs")
        assert PlainTextReporter().report_error(error) == (
            "error: Duplicate event name 'Jumped' declared in 'A.cs' and 'B.cs'\n"
        )


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_summary_without_color(self, result: GenerationResult) -> None:
        text = ConsoleReporter(color=False).report(result)
        assert "behaviorgen OK: 2 fragment(s), 1 custom signal(s), 0 error(s), 1 warning(s)" in text
        assert "\x1b[" not in text

    def test_tables(self, result: GenerationResult) -> None:
        text = ConsoleReporter(color=False).report(result)
        assert "Fragments" in text
        assert "Behavior.g.cs" in text
        assert "Diagnostics" in text
        assert "MALFORMED_DECLARATION" in text

    def test_markup_in_messages_is_escaped(self, result: GenerationResult) -> None:
        # "[Signal]" must survive rich markup parsing
        text = ConsoleReporter(color=False, width=200).report(result)
        assert "[Signal]" in text

    def test_color_emits_ansi(self, result: GenerationResult) -> None:
        text = ConsoleReporter(color=True).report(result)
        assert "\x1b[" in text

    def test_failed_status(self, result: GenerationResult) -> None:
        failed = GenerationResult(
            fragments=(),
            diagnostics=(
                Diagnostic(DiagnosticKind.UNREADABLE_ARTIFACT, Severity.ERROR, "boom", "Bad.cs"),
            ),
            table=result.table,
        )
        text = ConsoleReporter(color=False).report(failed)
        assert "FAILED" in text
        assert "Fragments" not in text

    def test_report_error(self) -> None:
        text = ConsoleReporter(color=False).report_error(
            DuplicateEventNameError("Jumped", "A.cs", "B.cs")
        )
        assert text.startswith("error: Duplicate event name 'Jumped'")
