"""Checker registry.

Central registry of all built-in checkers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from stylecheck.application.checkers._base import BaseChecker
from stylecheck.application.checkers.copyright import CopyrightChecker
from stylecheck.application.checkers.text import (
    FileLengthChecker,
    ForbiddenStringChecker,
    LineLengthChecker,
    ModuleDocstringChecker,
    WhitespaceChecker,
)
from stylecheck.domain.ports.checker import CheckerProtocol

if TYPE_CHECKING:
    from stylecheck.domain.model.configuration import LintConfig


# Registry - tuple for immutability
# Order matters: violations of one file are reported in checker order
_ALL_CHECKERS: tuple[type[BaseChecker], ...] = (
    CopyrightChecker,
    ModuleDocstringChecker,
    FileLengthChecker,
    LineLengthChecker,
    WhitespaceChecker,
    ForbiddenStringChecker,
)


def checkers_from_config(config: LintConfig) -> tuple[CheckerProtocol, ...]:
    """Instantiate checkers enabled by config.

    Args:
        config: Linter configuration

    Returns:
        Tuple of enabled checkers
    """
    checkers: list[CheckerProtocol] = []

    for checker_cls in _ALL_CHECKERS:
        checker = checker_cls.from_config(config)
        if checker is not None:
            checkers.append(checker)

    return tuple(checkers)
