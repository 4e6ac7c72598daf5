"""Checker protocol for line-oriented style checkers.

Users extend stylecheck by implementing this Protocol.
Checkers look at the raw lines of one file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Self

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stylecheck.domain.model.configuration import LintConfig
    from stylecheck.domain.model.violation import StyleViolation


class CheckerProtocol(Protocol):
    """Contract for style checkers.

    Checkers are stateless and check one file at a time.

    Key pattern: from_config() returns None if checker should be disabled.

    Example:
        class NoTabsChecker:
            kinds = frozenset({"ERR_TAB"})

            def check(
                self,
                file_path: str,
                lines: Sequence[str],
                config: LintConfig,
            ) -> tuple[StyleViolation, ...]:
                return tuple(
                    StyleViolation(file_path, n, "ERR_TAB", "Tab character")
                    for n, line in enumerate(lines, start=1)
                    if "\\t" in line
                )

            @classmethod
            def from_config(cls, config: LintConfig) -> Self | None:
                return cls() if config.reports("ERR_TAB") else None
    """

    kinds: frozenset[str]
    """Rule kinds this checker can report."""

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
        ...

    @classmethod
    def from_config(cls, config: LintConfig) -> Self | None:
        """Create checker from config.

        Args:
            config: Linter configuration

        Returns:
            Checker instance if enabled, None if disabled
        """
        ...
