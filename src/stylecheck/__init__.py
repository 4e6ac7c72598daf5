"""stylecheck - style linting and module discovery for Lean proof libraries."""

__version__ = "0.1.0"

from stylecheck.application.discovery import list_files, list_modules, resolve_build_libraries
from stylecheck.application.registry import ExceptionRegistry

__all__ = [
    "ExceptionRegistry",
    "__version__",
    "list_files",
    "list_modules",
    "resolve_build_libraries",
]
