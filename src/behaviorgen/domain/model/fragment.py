"""Generated source fragment value object."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath


def fragment_hint_name(artifact_id: str, generated_suffix: str = ".g") -> str:
    """Derive the output file name for an artifact.

    Inserts generated_suffix before the extension:
        Behavior.cs -> Behavior.g.cs
        Enemy.Behavior.cs -> Enemy.Behavior.g.cs

    Args:
        artifact_id: Source file name
        generated_suffix: Marker inserted before the extension

    Returns:
        Output file name
    """
    if not artifact_id:
        raise ValueError("artifact_id must not be empty")

    path = PurePath(artifact_id)
    if not path.suffix:
        return f"{artifact_id}{generated_suffix}"
    return f"{path.stem}{generated_suffix}{path.suffix}"


@dataclass(frozen=True, slots=True)
class GeneratedFragment:
    """Companion source emitted for one artifact.

    Attributes:
        artifact_id: Artifact the fragment belongs to
        hint_name: Output file name (e.g. Behavior.g.cs)
        source: Generated C# text
        is_root: Whether it carries the connect/disconnect methods and tables
    """

    artifact_id: str
    hint_name: str
    source: str
    is_root: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.artifact_id:
            raise ValueError("artifact_id must not be empty")
        if not self.hint_name:
            raise ValueError("hint_name must not be empty")
        if self.hint_name == self.artifact_id:
            raise ValueError(f"hint_name must differ from artifact_id '{self.artifact_id}'")
