"""Build library resolution from the workspace configuration."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stylecheck.domain.model.configuration import PrimaryProjectSettings

if TYPE_CHECKING:
    from stylecheck.domain.ports.workspace_loader import WorkspaceLoaderPort

logger = logging.getLogger(__name__)


def resolve_build_libraries(
    loader: WorkspaceLoaderPort,
    settings: PrimaryProjectSettings | None = None,
) -> tuple[str, ...]:
    """Resolve the library names of the workspace root package.

    The primary project declares libraries that hold no library source
    (settings.excluded) and has one library root that is not declared
    at all (settings.extra). Both are adjusted here.

    Args:
        loader: Workspace configuration loader
        settings: Primary project adjustments (default: mathlib)

    Returns:
        Library names in declaration order, extra library last

    Raises:
        ConfigLoadError: If the workspace cannot be loaded

    Example:
        >>> resolve_build_libraries(LakefileWorkspaceLoader(Path(".")))
        ('Mathlib', 'Archive', 'Counterexamples', 'Mathlib/Tactic')
    """
    settings = settings or PrimaryProjectSettings()
    info = loader.load()

    if info.name != settings.primary_name:
        return info.libraries

    libs = [lib for lib in info.libraries if lib not in settings.excluded]
    if settings.extra not in libs:
        libs.append(settings.extra)

    logger.debug("resolved libraries of primary project %s: %s", info.name, libs)
    return tuple(libs)
