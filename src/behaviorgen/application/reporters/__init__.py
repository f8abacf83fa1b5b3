"""Reporters for generation results."""

from behaviorgen.application.reporters._base import BaseReporter
from behaviorgen.application.reporters.console import ConsoleReporter
from behaviorgen.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "PlainTextReporter",
]
