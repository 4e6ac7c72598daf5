"""Lake workspace configuration loader.

Implements WorkspaceLoaderPort for ``lakefile.toml`` and, as a fallback,
the declarations of a ``lakefile.lean``.
"""

from __future__ import annotations

import logging
import re
import tomllib
from typing import TYPE_CHECKING

from stylecheck.domain.exceptions.config import ConfigLoadError
from stylecheck.domain.model.workspace import WorkspaceInfo
from stylecheck.domain.ports.workspace_loader import WorkspaceLoaderPort

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

LAKEFILE_TOML = "lakefile.toml"
LAKEFILE_LEAN = "lakefile.lean"

# `package mathlib where`, `package «my-pkg»`
_PACKAGE_PATTERN = re.compile(r"^\s*package\s+«?([\w.\-]+)»?", re.MULTILINE)
# `lean_lib Mathlib where`, `@[default_target] lean_lib «Cache»`
_LEAN_LIB_PATTERN = re.compile(
    r"^\s*(?:@\[[^\]]*\]\s*)?lean_lib\s+«?([\w.\-]+)»?",
    re.MULTILINE,
)
_LINE_COMMENT_PATTERN = re.compile(r"--.*$", re.MULTILINE)
_BLOCK_COMMENT_PATTERN = re.compile(r"/-.*?-/", re.DOTALL)


class LakefileWorkspaceLoader(WorkspaceLoaderPort):
    """Load the root package of a Lake workspace.

    FAIL-FIRST: raises ConfigLoadError on any loading issue.
    """

    def __init__(self, workspace_dir: Path) -> None:
        """Initialize loader.

        Args:
            workspace_dir: Directory containing the lakefile
        """
        if workspace_dir is None:
            raise TypeError("workspace_dir must not be None")

        self._workspace_dir = workspace_dir

    def load(self) -> WorkspaceInfo:
        """Load package name and declared libraries.

        Returns:
            Workspace description

        Raises:
            ConfigLoadError: If no lakefile exists or it is malformed
        """
        toml_path = self._workspace_dir / LAKEFILE_TOML
        if toml_path.is_file():
            return self._load_toml(toml_path)

        lean_path = self._workspace_dir / LAKEFILE_LEAN
        if lean_path.is_file():
            return self._load_lean(lean_path)

        raise ConfigLoadError(
            self._workspace_dir,
            f"no {LAKEFILE_TOML} or {LAKEFILE_LEAN} found",
        )

    def _load_toml(self, path: Path) -> WorkspaceInfo:
        """Parse lakefile.toml: top-level `name`, `[[lean_lib]]` tables."""
        try:
            with path.open("rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigLoadError(path, f"invalid TOML: {e}") from e
        except OSError as e:
            raise ConfigLoadError(path, e.strerror or str(e)) from e

        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigLoadError(path, "missing package name")

        tables = data.get("lean_lib", [])
        if not isinstance(tables, list):
            raise ConfigLoadError(path, "lean_lib must be an array of tables")

        libraries: list[str] = []
        for table in tables:
            lib = table.get("name") if isinstance(table, dict) else None
            if not isinstance(lib, str) or not lib:
                raise ConfigLoadError(path, "lean_lib entry without a name")
            libraries.append(lib)

        logger.debug("loaded %s: package %s, libraries %s", path, name, libraries)
        return WorkspaceInfo(name=name, libraries=tuple(libraries))

    def _load_lean(self, path: Path) -> WorkspaceInfo:
        """Scan lakefile.lean for `package` and `lean_lib` declarations."""
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigLoadError(path, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise ConfigLoadError(path, f"encoding error: {e}") from e

        source = _BLOCK_COMMENT_PATTERN.sub("", source)
        source = _LINE_COMMENT_PATTERN.sub("", source)

        package = _PACKAGE_PATTERN.search(source)
        if package is None:
            raise ConfigLoadError(path, "missing package declaration")

        libraries = tuple(m.group(1) for m in _LEAN_LIB_PATTERN.finditer(source))

        logger.debug("loaded %s: package %s, libraries %s", path, package.group(1), libraries)
        return WorkspaceInfo(name=package.group(1), libraries=libraries)
