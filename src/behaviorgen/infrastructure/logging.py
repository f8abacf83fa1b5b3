"""structlog configuration.

Console output goes through rich's RichHandler, "json" renders one JSON
object per line for CI logs.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from rich.logging import RichHandler

_CONFIGURED = False


def configure_logging(*, level: str = "WARNING", fmt: str = "console") -> None:
    """Configure structlog over stdlib logging. Idempotent.

    Args:
        level: Log level name
        fmt: "console" (rich) or "json"

    Raises:
        ValueError: If level or fmt is unknown (FAIL-FIRST)
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    numeric = logging.getLevelNamesMapping().get(level.upper())
    if numeric is None:
        raise ValueError(f"unknown log level {level!r}")
    if fmt not in ("console", "json"):
        raise ValueError(f"fmt must be 'console' or 'json', got {fmt!r}")

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(numeric)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    handler: logging.Handler
    if fmt == "console":
        handler = RichHandler(
            rich_tracebacks=True,
            markup=False,
            show_time=False,
            show_path=False,
        )
        processors.append(structlog.processors.KeyValueRenderer(sort_keys=True))
    else:
        handler = logging.StreamHandler(stream=sys.stderr)
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
        processors.append(structlog.processors.JSONRenderer())

    handler.setFormatter(logging.Formatter("%(message)s"))
    handler.setLevel(numeric)
    root.addHandler(handler)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _CONFIGURED = True

