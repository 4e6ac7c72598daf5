"""Application services: lint runs and exception audits."""

from stylecheck.application.services.linter import (
    audit_exceptions,
    lint_paths,
    lint_roots,
    out_of_scope_records,
)

__all__ = [
    "audit_exceptions",
    "lint_paths",
    "lint_roots",
    "out_of_scope_records",
]
