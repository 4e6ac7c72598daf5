"""Line-based text checkers: length, whitespace, docstrings, forbidden strings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylecheck.application.checkers._base import BaseChecker, strip_eol
from stylecheck.application.checkers.copyright import HEADER_CLOSE, HEADER_OPEN
from stylecheck.domain.model.rule_kinds import (
    DEFAULT_MESSAGES,
    ERR_LIN,
    ERR_MOD,
    ERR_NUM_LIN,
    ERR_STR,
    ERR_TWS,
    ERR_WIN,
)
from stylecheck.domain.model.violation import StyleViolation

if TYPE_CHECKING:
    from collections.abc import Sequence

    from stylecheck.domain.model.configuration import LintConfig

COMMENT_PREFIX = "--"
MODULE_DOC_OPEN = "/-!"


class LineLengthChecker(BaseChecker):
    """Lines longer than max_line_length. URLs are exempt."""

    kinds = frozenset({ERR_LIN})

    def check(
        self,
        file_path: str,
        lines: Sequence[str],
        config: LintConfig,
    ) -> tuple[StyleViolation, ...]:
        limit = config.max_line_length
        message = f"Line has more than {limit} characters"
        return tuple(
            StyleViolation(file_path, n, ERR_LIN, message)
            for n, line in enumerate(lines, start=1)
            if len(strip_eol(line)) > limit and "http" not in line
        )


class FileLengthChecker(BaseChecker):
    """Files longer than max_file_lines, reported at line 1."""

    kinds = frozenset({ERR_NUM_LIN})

    def check(
        self,
        file_path: str,
        lines: Sequence[str],
        config: LintConfig,
    ) -> tuple[StyleViolation, ...]:
        count = len(lines)
        if count <= config.max_file_lines:
            return ()

        limit = config.max_file_lines
        message = f"file contains {count} lines (at most {limit}), try to split it up"
        return (StyleViolation(file_path, 1, ERR_NUM_LIN, message),)


class WhitespaceChecker(BaseChecker):
    """Trailing whitespace and Windows line endings."""

    kinds = frozenset({ERR_TWS, ERR_WIN})

    def check(
        self,
        file_path: str,
        lines: Sequence[str],
        config: LintConfig,
    ) -> tuple[StyleViolation, ...]:
        violations: list[StyleViolation] = []

        for n, line in enumerate(lines, start=1):
            if line.endswith("\r\n"):
                violations.append(StyleViolation(file_path, n, ERR_WIN, DEFAULT_MESSAGES[ERR_WIN]))

            content = strip_eol(line)
            if content != content.rstrip(" \t"):
                violations.append(StyleViolation(file_path, n, ERR_TWS, DEFAULT_MESSAGES[ERR_TWS]))

        return tuple(violations)


class ModuleDocstringChecker(BaseChecker):
    """A ``/-!`` module docstring must follow the header and imports."""

    kinds = frozenset({ERR_MOD})

    def check(
        self,
        file_path: str,
        lines: Sequence[str],
        config: LintConfig,
    ) -> tuple[StyleViolation, ...]:
        text = [strip_eol(line).strip() for line in lines]
        index = _skip_header(text)

        while index < len(text) and (not text[index] or text[index].startswith("import ")):
            index += 1

        if index < len(text) and text[index].startswith(MODULE_DOC_OPEN):
            return ()

        line_no = min(index + 1, len(text)) or 1
        return (StyleViolation(file_path, line_no, ERR_MOD, DEFAULT_MESSAGES[ERR_MOD]),)


class ForbiddenStringChecker(BaseChecker):
    """Code lines starting with a forbidden string (debug commands by default)."""

    kinds = frozenset({ERR_STR})

    def __init__(self, forbidden: tuple[str, ...]) -> None:
        """Initialize checker.

        Args:
            forbidden: Strings that must not start a line of code
        """
        if not forbidden:
            raise ValueError("forbidden must not be empty")
        self._forbidden = forbidden

    @classmethod
    def from_config(cls, config: LintConfig) -> ForbiddenStringChecker | None:
        """Disabled when ERR_STR is filtered out or nothing is forbidden."""
        if not config.reports(ERR_STR) or not config.forbidden_strings:
            return None
        return cls(config.forbidden_strings)

    def check(
        self,
        file_path: str,
        lines: Sequence[str],
        config: LintConfig,
    ) -> tuple[StyleViolation, ...]:
        violations: list[StyleViolation] = []

        for n, line in enumerate(lines, start=1):
            stripped = strip_eol(line).lstrip()
            if stripped.startswith(COMMENT_PREFIX):
                continue

            for forbidden in self._forbidden:
                rest = stripped.removeprefix(forbidden)
                if rest != stripped and (not rest or rest[0].isspace()):
                    message = f"{DEFAULT_MESSAGES[ERR_STR]}: {forbidden}"
                    violations.append(StyleViolation(file_path, n, ERR_STR, message))
                    break

        return tuple(violations)


def _skip_header(text: Sequence[str]) -> int:
    """Index of the first line after the copyright header (0 if none)."""
    if not text or text[0] != HEADER_OPEN:
        return 0

    for index, line in enumerate(text):
        if line == HEADER_CLOSE:
            return index + 1

    return len(text)
