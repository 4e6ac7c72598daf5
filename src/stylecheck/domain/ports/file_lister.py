"""File lister port (version-control listing capability)."""

from collections.abc import Callable, Sequence
from typing import TypeAlias

# (root, extension) -> paths relative to the workspace, e.g. "Mathlib/Foo.lean".
# Infrastructure provides GitFileLister; tests substitute a plain function.
FileListerPort: TypeAlias = Callable[[str, str], Sequence[str]]
