"""Style violation entity."""

from dataclasses import dataclass

from stylecheck.domain.model.exception_record import (
    ExceptionRecord,
    RecordKey,
    format_entry,
    validate_entry,
)


@dataclass(frozen=True, slots=True)
class StyleViolation:
    """Violation found by a style checker.

    Rendered in the exception-list shape, so reported violations
    can be copied into the exception list verbatim.

    Attributes:
        file_path: Relative POSIX path of the file
        line: Line number (1-based, must be > 0)
        kind: Rule kind tag
        message: Human-readable message
    """

    file_path: str
    line: int
    kind: str
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        validate_entry(self.file_path, self.line, self.kind)
        if not self.message:
            raise ValueError("message must not be empty")

    @property
    def key(self) -> RecordKey:
        """Lookup key: (file_path, line, kind)."""
        return (self.file_path, self.line, self.kind)

    def to_record(self) -> ExceptionRecord:
        """Convert to exception record (accept this violation)."""
        return ExceptionRecord(
            file_path=self.file_path,
            line=self.line,
            kind=self.kind,
            message=self.message,
        )

    def __str__(self) -> str:
        """Format as exception-list line."""
        return format_entry(self.file_path, self.line, self.kind, self.message)
