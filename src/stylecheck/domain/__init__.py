"""stylecheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, re, pathlib, collections.abc
"""

from stylecheck.domain.exceptions import (
    ConfigLoadError,
    DiscoveryError,
    ListingCommandError,
    MalformedExceptionRecordError,
    StyleCheckError,
)
from stylecheck.domain.model import (
    ExceptionRecord,
    LintConfig,
    LintResult,
    PrimaryProjectSettings,
    StyleViolation,
    WorkspaceInfo,
)
from stylecheck.domain.ports import (
    CheckerProtocol,
    FileListerPort,
    WorkspaceLoaderPort,
)

__all__ = [
    # Exceptions
    "StyleCheckError",
    "ConfigLoadError",
    "DiscoveryError",
    "ListingCommandError",
    "MalformedExceptionRecordError",
    # Value objects
    "ExceptionRecord",
    "StyleViolation",
    "WorkspaceInfo",
    "LintResult",
    # Configuration
    "LintConfig",
    "PrimaryProjectSettings",
    # Ports
    "CheckerProtocol",
    "FileListerPort",
    "WorkspaceLoaderPort",
]
