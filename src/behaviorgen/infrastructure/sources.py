"""Source artifact discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pathlib

# Default directories to exclude from discovery
DEFAULT_EXCLUDES = frozenset(
    {
        ".git",
        ".godot",
        ".import",
        ".mono",
        ".vs",
        ".vscode",
        ".idea",
        "bin",
        "obj",
        "addons",
    },
)

SOURCE_SUFFIX = ".cs"


def is_generated(path: pathlib.Path, generated_suffix: str = ".g") -> bool:
    """Check if path is a previously generated fragment (e.g. Behavior.g.cs)."""
    return path.name.endswith(f"{generated_suffix}{SOURCE_SUFFIX}")


def discover_sources(
    root: pathlib.Path,
    *,
    exclude: frozenset[str] = DEFAULT_EXCLUDES,
    generated_suffix: str = ".g",
) -> list[pathlib.Path]:
    """Find all .cs files under root, excluding generated ones.

    Args:
        root: Directory to scan
        exclude: Directory names to skip
        generated_suffix: Marker identifying generated fragments

    Returns:
        Sorted list of source paths

    Raises:
        NotADirectoryError: If root is not a directory (FAIL-FIRST)
    """
    if not root.is_dir():
        raise NotADirectoryError(f"source root is not a directory: {root}")

    return sorted(_find_sources(root, exclude, generated_suffix))


def _find_sources(
    root: pathlib.Path,
    exclude: frozenset[str],
    generated_suffix: str,
) -> list[pathlib.Path]:
    result: list[pathlib.Path] = []

    for item in root.iterdir():
        if item.is_dir():
            if item.name not in exclude:
                result.extend(_find_sources(item, exclude, generated_suffix))
        elif item.is_file() and item.suffix == SOURCE_SUFFIX:
            if not is_generated(item, generated_suffix):
                result.append(item)

    return result

