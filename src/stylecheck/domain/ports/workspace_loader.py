"""Workspace loader port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stylecheck.domain.model.workspace import WorkspaceInfo


class WorkspaceLoaderPort(ABC):
    """Port for loading build workspace configuration.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def load(self) -> WorkspaceInfo:
        """Load the root package name and its configured libraries.

        Returns:
            Loaded workspace description

        Raises:
            ConfigLoadError: If the configuration cannot be loaded
        """
        ...
