"""Lint run result aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stylecheck.domain.model.violation import StyleViolation


@dataclass(frozen=True, slots=True)
class LintResult:
    """Result of a lint run.

    Attributes:
        violations: New violations (not in the exception list)
        suppressed: Violations exempted by the exception list
        files_checked: Number of files linted
    """

    violations: tuple[StyleViolation, ...]
    suppressed: tuple[StyleViolation, ...]
    files_checked: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.files_checked < 0:
            raise ValueError(f"files_checked must be >= 0, got {self.files_checked}")

    @property
    def passed(self) -> bool:
        """Check if lint passed (no new violations)."""
        return len(self.violations) == 0

    @property
    def all_violations(self) -> tuple[StyleViolation, ...]:
        """New and suppressed violations together."""
        return self.violations + self.suppressed

    @classmethod
    def empty(cls) -> LintResult:
        """Create empty lint result (passed, nothing checked)."""
        return cls(violations=(), suppressed=(), files_checked=0)
