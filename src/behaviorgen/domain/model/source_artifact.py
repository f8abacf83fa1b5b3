"""Source artifact value object."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from pathlib import Path

from behaviorgen.domain.exceptions.parsing import ParsingError


@dataclass(frozen=True, slots=True)
class SourceArtifact:
    """One C# source file handed to the generator.

    Attributes:
        path: Source file path
        content: Full file text
    """

    path: Path
    content: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        if not self.path.name:
            raise ValueError("path must name a file")
        if self.content is None:
            raise TypeError("content must not be None")

    @property
    def artifact_id(self) -> str:
        """Stable identity: the file name."""
        return self.path.name

    @property
    def content_hash(self) -> str:
        """SHA-256 of the content, for change detection."""
        return hashlib.sha256(self.content.encode("utf-8")).hexdigest()

    @classmethod
    def read(cls, path: Path) -> SourceArtifact:
        """Read artifact from disk.

        Raises:
            ParsingError: If file cannot be read
        """
        try:
            content = path.read_text(encoding="utf-8-sig")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e

        return cls(path=path, content=content)
