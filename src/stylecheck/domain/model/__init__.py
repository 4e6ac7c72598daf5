"""Domain model entities."""

from stylecheck.domain.model.configuration import LintConfig, PrimaryProjectSettings
from stylecheck.domain.model.exception_record import ExceptionRecord, RecordKey
from stylecheck.domain.model.lint_result import LintResult
from stylecheck.domain.model.rule_kinds import (
    DEFAULT_MESSAGES,
    ERR_AUT,
    ERR_COP,
    ERR_LIN,
    ERR_MOD,
    ERR_NUM_LIN,
    ERR_STR,
    ERR_TWS,
    ERR_WIN,
    is_rule_kind,
)
from stylecheck.domain.model.violation import StyleViolation
from stylecheck.domain.model.workspace import WorkspaceInfo

__all__ = [
    # Rule kinds
    "DEFAULT_MESSAGES",
    "ERR_AUT",
    "ERR_COP",
    "ERR_LIN",
    "ERR_MOD",
    "ERR_NUM_LIN",
    "ERR_STR",
    "ERR_TWS",
    "ERR_WIN",
    "is_rule_kind",
    # Value objects
    "ExceptionRecord",
    "RecordKey",
    "StyleViolation",
    "WorkspaceInfo",
    "LintResult",
    # Configuration
    "LintConfig",
    "PrimaryProjectSettings",
]
