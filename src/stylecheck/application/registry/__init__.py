"""Exception registry: accepted linter findings.

Functions and types to load and query the exception list:
- Parse the line-oriented exception list format
- Look up (file, line, kind) triples
- Find stale records, regenerate the list
"""

from stylecheck.application.registry.parser import parse_exceptions, render_exceptions
from stylecheck.application.registry.registry import ExceptionRegistry

__all__ = [
    "ExceptionRegistry",
    "parse_exceptions",
    "render_exceptions",
]
