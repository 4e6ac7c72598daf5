"""Discovery layer for library tooling.

Functions to discover project structure:
- Source files under a library root (walk or version-control listing)
- Module names from file paths
- Build libraries from the workspace configuration
- Aggregator files importing every module of a library
"""

from stylecheck.application.discovery.aggregator import (
    aggregator_path,
    render_aggregator,
    sync_aggregator,
)
from stylecheck.application.discovery.libs import resolve_build_libraries
from stylecheck.application.discovery.modules import (
    list_files,
    list_modules,
    module_name,
    module_path,
)

__all__ = [
    "aggregator_path",
    "list_files",
    "list_modules",
    "module_name",
    "module_path",
    "render_aggregator",
    "resolve_build_libraries",
    "sync_aggregator",
]
