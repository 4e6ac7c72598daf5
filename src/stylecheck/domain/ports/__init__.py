"""Domain ports (interfaces) for external collaborators."""

from stylecheck.domain.ports.checker import CheckerProtocol
from stylecheck.domain.ports.file_lister import FileListerPort
from stylecheck.domain.ports.workspace_loader import WorkspaceLoaderPort

__all__ = [
    "CheckerProtocol",
    "FileListerPort",
    "WorkspaceLoaderPort",
]
