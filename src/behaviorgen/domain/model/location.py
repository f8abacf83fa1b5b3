"""Declaration position inside a source artifact."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Where a declaration starts.

    Attributes:
        file: Artifact path
        line: 1-based line (> 0)
        column: 0-based column (>= 0)
    """

    file: Path
    line: int
    column: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    @classmethod
    def from_point(cls, file: Path, point: tuple[int, int]) -> Location:
        """Build from a 0-based (row, column) syntax tree point."""
        row, column = point
        return cls(file=file, line=row + 1, column=column)

    def __str__(self) -> str:
        """Compiler style file:line:column."""
        return f"{self.file}:{self.line}:{self.column}"
