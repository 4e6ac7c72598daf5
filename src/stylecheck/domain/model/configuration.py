"""Linter and discovery configuration.

Immutable configuration objects with FAIL-FIRST validation.
Built by the CLI from options; passed explicitly, never global.
"""

from __future__ import annotations

from dataclasses import dataclass

from stylecheck.domain.model.rule_kinds import is_rule_kind

DEFAULT_FORBIDDEN_STRINGS = ("#eval", "#print", "#check", "#reduce")


@dataclass(frozen=True, slots=True)
class LintConfig:
    """Style linter configuration.

    Attributes:
        extension: Source file extension, including the dot
        max_line_length: Longest allowed line (characters, no line ending)
        max_file_lines: Longest allowed file (lines)
        forbidden_strings: Strings that must not start a line of code
        kinds: Rule kinds to report. None = all kinds.
        use_git: List files via version control instead of walking
    """

    extension: str = ".lean"
    max_line_length: int = 100
    max_file_lines: int = 1500
    forbidden_strings: tuple[str, ...] = DEFAULT_FORBIDDEN_STRINGS
    kinds: frozenset[str] | None = None
    use_git: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.extension.startswith(".") or len(self.extension) < 2:
            raise ValueError(f"extension must look like '.ext', got {self.extension!r}")

        if self.max_line_length < 1:
            raise ValueError(f"max_line_length must be >= 1, got {self.max_line_length}")

        if self.max_file_lines < 1:
            raise ValueError(f"max_file_lines must be >= 1, got {self.max_file_lines}")

        if any(not s for s in self.forbidden_strings):
            raise ValueError("forbidden_strings must not contain empty strings")

        if self.kinds is not None:
            bad = sorted(k for k in self.kinds if not is_rule_kind(k))
            if bad:
                raise ValueError(f"kinds contains malformed rule kinds: {bad}")

    def reports(self, kind: str) -> bool:
        """Check if violations of this kind are reported."""
        return self.kinds is None or kind in self.kinds


@dataclass(frozen=True, slots=True)
class PrimaryProjectSettings:
    """Library adjustments for the primary project.

    When the workspace root package is named primary_name, the
    excluded libraries are dropped and extra is appended.

    Attributes:
        primary_name: Package name of the primary project
        excluded: Library names that hold no library source
        extra: Library name that is not declared in the configuration
    """

    primary_name: str = "mathlib"
    excluded: frozenset[str] = frozenset({"Cache", "LongestPole"})
    extra: str = "Mathlib/Tactic"

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.primary_name:
            raise ValueError("primary_name must not be empty")
        if not self.extra:
            raise ValueError("extra must not be empty")
        if self.extra in self.excluded:
            raise ValueError(f"extra {self.extra!r} must not be excluded")
