"""Configuration file loading.

Reads the [tool.behaviorgen] table of a TOML file, normally pyproject.toml:

    [tool.behaviorgen]
    root-artifact = "Behavior.cs"
    id-ordering = "sorted"
    max-workers = 4
"""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING

from behaviorgen.domain.exceptions.configuration import ConfigurationError
from behaviorgen.domain.model.configuration import GeneratorConfig

if TYPE_CHECKING:
    from pathlib import Path

TOOL_TABLE = "behaviorgen"


def load_config(path: Path) -> GeneratorConfig:
    """Load generator config from a TOML file.

    A file without a [tool.behaviorgen] table yields the defaults.

    Args:
        path: TOML file

    Returns:
        GeneratorConfig

    Raises:
        ConfigurationError: If the file is unreadable, malformed, or has invalid values
    """
    try:
        with path.open("rb") as fh:
            document = tomllib.load(fh)
    except FileNotFoundError as e:
        raise ConfigurationError(str(path), "file not found") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(str(path), f"invalid TOML: {e}") from e

    table = document.get("tool", {}).get(TOOL_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigurationError(f"tool.{TOOL_TABLE}", "must be a table")

    return GeneratorConfig.from_mapping(table)
