"""Configuration loading exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylecheck.domain.exceptions.base import StyleCheckError

if TYPE_CHECKING:
    from pathlib import Path


class ConfigLoadError(StyleCheckError):
    """Workspace or exception-list configuration could not be loaded.

    Attributes:
        path: Configuration file or directory that failed
        reason: Why loading failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")
