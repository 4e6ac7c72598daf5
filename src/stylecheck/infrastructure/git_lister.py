"""Version-control file listing via ``git ls-files``.

Implements FileListerPort as a callable object.
"""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from stylecheck.domain.exceptions.discovery import ListingCommandError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class GitFileLister:
    """List tracked files under a root with a given extension.

    Runs ``git ls-files -z -- <root>/*<ext>`` in the workspace directory.
    NUL-separated output keeps non-ASCII paths unquoted.
    Git pathspec '*' also matches '/', so the listing is recursive.
    """

    def __init__(self, cwd: Path, git: str = "git") -> None:
        """Initialize lister.

        Args:
            cwd: Workspace directory (paths are listed relative to it)
            git: Git executable
        """
        if cwd is None:
            raise TypeError("cwd must not be None")

        self._cwd = cwd
        self._git = git

    def __call__(self, root: str, extension: str) -> tuple[str, ...]:
        """List tracked files.

        Args:
            root: Library root, POSIX path relative to cwd
            extension: Source file extension, including the dot

        Returns:
            Relative POSIX paths in git's order

        Raises:
            ListingCommandError: If git is missing or exits non-zero
        """
        command = [self._git, "ls-files", "-z", "--", f"{root}/*{extension}"]
        logger.debug("running %s in %s", command, self._cwd)

        try:
            completed = subprocess.run(
                command,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=True,
            )
        except FileNotFoundError as e:
            raise ListingCommandError(command, self._cwd, "executable not found") from e
        except subprocess.CalledProcessError as e:
            reason = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise ListingCommandError(command, self._cwd, reason) from e

        return tuple(path for path in completed.stdout.split("\0") if path)
