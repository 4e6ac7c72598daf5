"""Accepted linter finding (exception list entry)."""

from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TypeAlias

from stylecheck.domain.model.rule_kinds import is_rule_kind

# (file_path, line, kind)
RecordKey: TypeAlias = tuple[str, int, str]


def format_entry(file_path: str, line: int, kind: str, message: str) -> str:
    """Format one exception-list line: ``path : line N : KIND : message``."""
    return f"{file_path} : line {line} : {kind} : {message}"


def validate_entry(file_path: str, line: int, kind: str) -> None:
    """Validate the key fields shared by records and violations. FAIL-FIRST.

    Raises:
        ValueError: If any field is malformed
    """
    if not file_path:
        raise ValueError("file_path must not be empty")
    if PurePosixPath(file_path).is_absolute():
        raise ValueError(f"file_path must be relative, got {file_path!r}")
    if line <= 0:
        raise ValueError(f"line must be > 0, got {line}")
    if not is_rule_kind(kind):
        raise ValueError(f"kind must match [A-Z][A-Z0-9_]*, got {kind!r}")


@dataclass(frozen=True, slots=True)
class ExceptionRecord:
    """Pre-approved violation that the linter must not re-report.

    Attributes:
        file_path: Relative POSIX path of the file
        line: Line number (1-based, must be > 0)
        kind: Rule kind tag (e.g. ERR_COP)
        message: Human-readable message
    """

    file_path: str
    line: int
    kind: str
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        validate_entry(self.file_path, self.line, self.kind)

    @property
    def key(self) -> RecordKey:
        """Lookup key: (file_path, line, kind)."""
        return (self.file_path, self.line, self.kind)

    def __str__(self) -> str:
        """Format as exception-list line."""
        return format_entry(self.file_path, self.line, self.kind, self.message)
