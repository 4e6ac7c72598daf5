"""Base checker class for style checkers.

Provides default implementation of CheckerProtocol.
Concrete checkers inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stylecheck.domain.model.configuration import LintConfig
    from stylecheck.domain.model.violation import StyleViolation


class BaseChecker(ABC):
    """Base class for checkers implementing CheckerProtocol.

    Concrete checkers must:
    1. Set `kinds` class attribute
    2. Implement `check()` method
    3. Optionally override `from_config()` for conditional activation
    """

    kinds: frozenset[str]
    """Rule kinds this checker can report."""

    @abstractmethod
    def check(
        self,
        file_path: str,
        lines: Sequence[str],
        config: LintConfig,
    ) -> tuple[StyleViolation, ...]:
        """Check one file and return violations.

        Args:
            file_path: Relative POSIX path of the file
            lines: Raw lines of the file, line endings kept
            config: Linter configuration

        Returns:
            Tuple of violations found (empty if clean)
        """

    @classmethod
    def from_config(cls, config: LintConfig) -> Self | None:
        """Create checker if any of its kinds is reported.

        Override for checkers that need configuration values.

        Args:
            config: Linter configuration

        Returns:
            Checker instance if enabled, None if disabled
        """
        if not any(config.reports(kind) for kind in cls.kinds):
            return None
        return cls()


def strip_eol(line: str) -> str:
    """Remove the line ending (\\n or \\r\\n)."""
    return line.rstrip("\r\n")
