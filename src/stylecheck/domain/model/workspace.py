"""Build workspace description."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WorkspaceInfo:
    """Loaded build workspace configuration.

    Attributes:
        name: Package name of the root project
        libraries: Configured library names in declaration order
    """

    name: str
    libraries: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if any(not lib for lib in self.libraries):
            raise ValueError("library names must not be empty")
