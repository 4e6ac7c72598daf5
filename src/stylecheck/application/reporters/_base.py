"""Base reporter class for output formatting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stylecheck.domain.model.lint_result import LintResult


class BaseReporter(ABC):
    """Base class for reporters.

    Concrete reporters must implement the report() method.

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: LintResult) -> None:
                print(f"Violations: {len(result.violations)}")
    """

    @abstractmethod
    def report(self, result: LintResult) -> None:
        """Report lint results.

        Implementation decides output format and destination.

        Args:
            result: Lint result with new and suppressed violations
        """
