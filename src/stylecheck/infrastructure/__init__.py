"""Infrastructure adapters for external collaborators."""

from stylecheck.infrastructure.git_lister import GitFileLister
from stylecheck.infrastructure.lakefile import LakefileWorkspaceLoader

__all__ = [
    "GitFileLister",
    "LakefileWorkspaceLoader",
]
