"""File and module discovery under a library root."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from stylecheck.domain.exceptions.discovery import DiscoveryError
from stylecheck.infrastructure.git_lister import GitFileLister

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stylecheck.domain.ports.file_lister import FileListerPort

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".lean"


def list_files(
    root: str | PurePath,
    *,
    use_git: bool = False,
    extension: str = DEFAULT_EXTENSION,
    base_dir: Path | None = None,
    lister: FileListerPort | None = None,
) -> tuple[Path, ...]:
    """List all source files of a library root.

    Paths are relative to base_dir and start with root, e.g.
    ``Mathlib/Algebra/Group.lean`` for root ``Mathlib``.

    The root aggregator file ``<root><extension>`` is never included.
    Paths that do not exist on disk are dropped silently: a
    version-control listing may be stale relative to the working tree.

    Args:
        root: Library root directory, relative to base_dir
        use_git: List tracked files instead of walking the directory
        extension: Source file extension, including the dot
        base_dir: Workspace directory (default: current directory)
        lister: Version-control listing capability (default: git ls-files)

    Returns:
        Paths sorted lexicographically by their POSIX string

    Raises:
        DiscoveryError: If root is empty, not a directory or cannot be walked
        ListingCommandError: If the listing command fails

    Example:
        >>> list_files("Mathlib")
        (PosixPath('Mathlib/Algebra/Group.lean'), PosixPath('Mathlib/Logic/Basic.lean'), ...)
    """
    base = base_dir if base_dir is not None else Path.cwd()
    root_posix = _root_posix(root)

    if use_git:
        listing = lister if lister is not None else GitFileLister(base)
        candidates: Iterable[Path] = (Path(p) for p in listing(root_posix, extension) if p)
    else:
        candidates = _walk_files(base, root_posix, extension)

    aggregator = f"{root_posix}{extension}"
    files: list[Path] = []

    for path in candidates:
        if path.as_posix() == aggregator:
            continue

        if not (base / path).exists():
            logger.debug("dropping stale listing entry %s", path)
            continue

        files.append(path)

    files.sort(key=lambda p: p.as_posix())
    logger.debug("found %d %s files under %s", len(files), extension, root_posix)
    return tuple(files)


def list_modules(
    root: str | PurePath,
    *,
    use_git: bool = False,
    extension: str = DEFAULT_EXTENSION,
    base_dir: Path | None = None,
    lister: FileListerPort | None = None,
) -> tuple[str, ...]:
    """List module names of all source files of a library root.

    One module per file returned by list_files(), same order.

    Example:
        >>> list_modules("Mathlib")
        ('Mathlib.Algebra.Group', 'Mathlib.Logic.Basic', ...)
    """
    files = list_files(
        root,
        use_git=use_git,
        extension=extension,
        base_dir=base_dir,
        lister=lister,
    )
    return tuple(module_name(f, extension) for f in files)


def module_name(path: str | PurePath, extension: str = DEFAULT_EXTENSION) -> str:
    """Convert relative file path to module name.

    Examples:
        Mathlib/Algebra/Group.lean → Mathlib.Algebra.Group
        Archive/Imo.lean → Archive.Imo

    Raises:
        ValueError: If path does not end with extension
    """
    posix = PurePath(path).as_posix()

    if not posix.endswith(extension) or posix == extension:
        raise ValueError(f"path must end with {extension!r}: {posix}")

    stem = PurePath(posix[: -len(extension)])
    return ".".join(stem.parts)


def module_path(name: str, extension: str = DEFAULT_EXTENSION) -> Path:
    """Convert module name back to relative file path.

    Inverse of module_name().

    Raises:
        ValueError: If name is empty or has empty components
    """
    parts = name.split(".")
    if not all(parts):
        raise ValueError(f"invalid module name: {name!r}")

    return Path(*parts[:-1], f"{parts[-1]}{extension}")


def _root_posix(root: str | PurePath) -> str:
    """Normalize root to POSIX string without trailing separator.

    Raises:
        DiscoveryError: If root is empty or the workspace itself
    """
    posix = PurePath(root).as_posix()

    if posix in ("", "."):
        raise DiscoveryError(Path(posix), "root must name a library directory")

    return posix


def _walk_files(base: Path, root: str, extension: str) -> list[Path]:
    """Find all files with extension under base/root, relative to base."""
    root_dir = base / root

    if not root_dir.is_dir():
        raise DiscoveryError(root_dir, "not a directory")

    result: list[Path] = []
    _walk_dir(root_dir, Path(root), extension, result)
    return result


def _walk_dir(directory: Path, relative: Path, extension: str, result: list[Path]) -> None:
    """Recurse into directory, appending matching files as relative paths."""
    try:
        entries = sorted(directory.iterdir())
    except PermissionError as e:
        raise DiscoveryError(directory, "permission denied") from e
    except OSError as e:
        raise DiscoveryError(directory, e.strerror or str(e)) from e

    for item in entries:
        if item.is_dir():
            _walk_dir(item, relative / item.name, extension, result)
        elif item.is_file() and item.name.endswith(extension) and item.name != extension:
            result.append(relative / item.name)
