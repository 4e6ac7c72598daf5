"""Aggregator files: ``<root>.lean`` importing every module under ``<root>/``."""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from stylecheck.application.discovery.modules import DEFAULT_EXTENSION, list_modules
from stylecheck.domain.exceptions.discovery import DiscoveryError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stylecheck.domain.ports.file_lister import FileListerPort

logger = logging.getLogger(__name__)


def aggregator_path(root: str | PurePath, extension: str = DEFAULT_EXTENSION) -> Path:
    """Path of the aggregator file of a library root: ``<root><extension>``."""
    return Path(f"{PurePath(root).as_posix()}{extension}")


def render_aggregator(modules: Iterable[str]) -> str:
    """Render aggregator contents: one import per module, in the given order."""
    return "".join(f"import {module}\n" for module in modules)


def sync_aggregator(
    root: str | PurePath,
    *,
    check: bool = False,
    use_git: bool = False,
    extension: str = DEFAULT_EXTENSION,
    base_dir: Path | None = None,
    lister: FileListerPort | None = None,
) -> bool:
    """Write or verify the aggregator file of a library root.

    Args:
        root: Library root directory, relative to base_dir
        check: Only compare, never write
        use_git: List tracked files instead of walking the directory
        extension: Source file extension, including the dot
        base_dir: Workspace directory (default: current directory)
        lister: Version-control listing capability

    Returns:
        True if the aggregator was already up to date

    Raises:
        DiscoveryError: If discovery fails or the aggregator cannot be read or written
    """
    base = base_dir if base_dir is not None else Path.cwd()
    target = base / aggregator_path(root, extension)

    modules = list_modules(
        root,
        use_git=use_git,
        extension=extension,
        base_dir=base,
        lister=lister,
    )
    expected = render_aggregator(modules)

    try:
        current = target.read_text(encoding="utf-8") if target.exists() else None
    except OSError as e:
        raise DiscoveryError(target, e.strerror or str(e)) from e

    if current == expected:
        return True

    if check:
        logger.warning("%s is out of date", target)
        return False

    try:
        target.write_text(expected, encoding="utf-8")
    except OSError as e:
        raise DiscoveryError(target, e.strerror or str(e)) from e

    logger.info("updated %s (%d imports)", target, len(modules))
    return False
