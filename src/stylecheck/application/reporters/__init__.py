"""Reporters for lint results.

PlainTextReporter prints violations in the exception-list shape.
ConsoleReporter renders a rich table.
"""

from stylecheck.application.reporters._base import BaseReporter
from stylecheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from stylecheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
