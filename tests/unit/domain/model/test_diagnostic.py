"""Tests for domain/model/diagnostic.py."""

from pathlib import Path

import pytest

from behaviorgen.domain.model.diagnostic import Diagnostic
from behaviorgen.domain.model.enums import DiagnosticKind, Severity
from behaviorgen.domain.model.location import Location


class TestDiagnostic:
    """Tests for Diagnostic."""

    def test_str_with_location(self) -> None:
        diagnostic = Diagnostic(
            kind=DiagnosticKind.MALFORMED_DECLARATION,
            severity=Severity.WARNING,
            message="bad name",
            artifact_id="Foo.cs",
            location=Location(Path("Foo.cs"), 5, 4),
        )
        assert str(diagnostic) == "[WARNING] MALFORMED_DECLARATION: bad name (Foo.cs:5:4)"

    def test_str_without_location_uses_artifact(self) -> None:
        diagnostic = Diagnostic(
            kind=DiagnosticKind.STALE_REGISTRY_ENTRY,
            severity=Severity.INFO,
            message="gone",
            artifact_id="Old.cs",
        )
        assert str(diagnostic) == "[INFO] STALE_REGISTRY_ENTRY: gone (Old.cs)"

    def test_empty_message_raises(self) -> None:
        with pytest.raises(ValueError, match="message must not be empty"):
            Diagnostic(DiagnosticKind.SYNTAX_ERROR, Severity.WARNING, "", "Foo.cs")

    def test_empty_artifact_raises(self) -> None:
        with pytest.raises(ValueError, match="artifact_id must not be empty"):
            Diagnostic(DiagnosticKind.SYNTAX_ERROR, Severity.WARNING, "msg", "")
