"""Command line entry point.

    behaviorgen SRC [--out DIR] [--config FILE] [--format console|plain]
                    [--log-level LEVEL] [--log-format console|json]

Exit codes: 0 success, 1 generation failed, 2 bad configuration or input.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from behaviorgen import __version__
from behaviorgen.application.reporters.console import ConsoleReporter
from behaviorgen.application.reporters.plain_text import PlainTextReporter
from behaviorgen.application.services.pipeline import GenerationPipeline
from behaviorgen.application.services.writer import FragmentWriter
from behaviorgen.domain.exceptions.base import BehaviorGenError
from behaviorgen.domain.exceptions.generation import (
    DuplicateArtifactError,
    DuplicateEventNameError,
)
from behaviorgen.domain.model.configuration import GeneratorConfig
from behaviorgen.infrastructure.config_loader import load_config
from behaviorgen.infrastructure.logging import configure_logging
from behaviorgen.infrastructure.sources import discover_sources

if TYPE_CHECKING:
    from collections.abc import Sequence

    from behaviorgen.domain.ports.reporter import ReporterProtocol

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

DEFAULT_OUT_DIR = "Generated"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="behaviorgen",
        description="Generate signal wiring for Godot C# Behavior classes.",
    )
    parser.add_argument("src", type=Path, help="directory with C# sources")
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help=f"output directory (default: SRC/{DEFAULT_OUT_DIR})",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="TOML file with a [tool.behaviorgen] table (default: SRC/pyproject.toml if present)",
    )
    parser.add_argument("--format", choices=("console", "plain"), default="console")
    parser.add_argument("--log-level", default="WARNING")
    parser.add_argument("--log-format", choices=("console", "json"), default="console")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(level=args.log_level, fmt=args.log_format)
    except ValueError as e:
        parser.error(str(e))

    reporter: ReporterProtocol = (
        ConsoleReporter(color=sys.stdout.isatty()) if args.format == "console" else PlainTextReporter()
    )

    src: Path = args.src
    out: Path = args.out if args.out is not None else src / DEFAULT_OUT_DIR

    try:
        config = _resolve_config(src, args.config)
        paths = discover_sources(src, generated_suffix=config.generated_suffix)
    except (BehaviorGenError, NotADirectoryError) as e:
        sys.stderr.write(reporter.report_error(e))
        return EXIT_USAGE

    try:
        result = GenerationPipeline(config).run_paths(paths)
    except DuplicateEventNameError as e:
        sys.stderr.write(reporter.report_error(e))
        return EXIT_FAILED
    except DuplicateArtifactError as e:
        sys.stderr.write(reporter.report_error(e))
        return EXIT_USAGE

    FragmentWriter(out).write(result.fragments)
    sys.stdout.write(reporter.report(result))

    return EXIT_OK if result.passed else EXIT_FAILED


def _resolve_config(src: Path, config_path: Path | None) -> GeneratorConfig:
    """Explicit --config, else SRC/pyproject.toml, else defaults."""
    if config_path is not None:
        return load_config(config_path)

    candidate = src / "pyproject.toml"
    if candidate.is_file():
        return load_config(candidate)

    return GeneratorConfig()
