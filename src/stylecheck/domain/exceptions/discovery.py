"""File discovery exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylecheck.domain.exceptions.base import StyleCheckError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class DiscoveryError(StyleCheckError):
    """File-system walk or file read failed.

    Attributes:
        path: Offending path
        reason: Why the operation failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ListingCommandError(DiscoveryError):
    """External file listing command failed or is not installed.

    Attributes:
        command: Command line that was run
        path: Working directory of the command
        reason: Why the command failed
    """

    def __init__(self, command: Sequence[str], path: Path, reason: str) -> None:
        if not command:
            raise ValueError("command must not be empty")

        self.command = tuple(command)
        super().__init__(path, f"`{' '.join(self.command)}` failed: {reason}")
