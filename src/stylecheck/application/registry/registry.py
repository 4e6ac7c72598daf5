"""Exception registry: lookup table of accepted findings."""

from __future__ import annotations

from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from stylecheck.application.registry.parser import parse_exceptions
from stylecheck.domain.exceptions.config import ConfigLoadError
from stylecheck.domain.exceptions.registry import MalformedExceptionRecordError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from stylecheck.domain.model.exception_record import ExceptionRecord, RecordKey
    from stylecheck.domain.model.violation import StyleViolation


class ExceptionRegistry:
    """Immutable set of pre-approved linter findings.

    Constructed once per run from a parsed resource and passed
    explicitly to the linter. Lookups are exact on (file, line, kind).

    Example:
        >>> registry = ExceptionRegistry.from_text("X.lean : 4 : ERR_COP : bad header")
        >>> registry.lookup("X.lean", 4, "ERR_COP")
        True
        >>> registry.lookup("X.lean", 5, "ERR_COP")
        False
    """

    __slots__ = ("_by_key", "_records")

    def __init__(self, records: Iterable[ExceptionRecord], source: str = "<records>") -> None:
        """Build lookup table.

        Args:
            records: Records in load order
            source: Name used in error messages

        Raises:
            MalformedExceptionRecordError: If two records share a key
        """
        records = tuple(records)
        by_key: dict[RecordKey, ExceptionRecord] = {}

        for index, record in enumerate(records, start=1):
            if record.key in by_key:
                raise MalformedExceptionRecordError(
                    source,
                    index,
                    f"duplicate record for {record.file_path} line {record.line} {record.kind}",
                )
            by_key[record.key] = record

        self._records = records
        self._by_key: Mapping[RecordKey, ExceptionRecord] = by_key

    @classmethod
    def from_text(cls, text: str, source: str = "<string>") -> ExceptionRegistry:
        """Parse exception list text and build registry.

        Raises:
            MalformedExceptionRecordError: If any record is malformed
        """
        return cls(parse_exceptions(text, source), source)

    @classmethod
    def from_file(cls, path: Path) -> ExceptionRegistry:
        """Read exception list file and build registry.

        Raises:
            ConfigLoadError: If the file cannot be read
            MalformedExceptionRecordError: If any record is malformed
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ConfigLoadError(path, "exception list not found") from e
        except PermissionError as e:
            raise ConfigLoadError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise ConfigLoadError(path, f"encoding error: {e}") from e

        return cls.from_text(text, str(path))

    @classmethod
    def empty(cls) -> ExceptionRegistry:
        """Create registry with no exceptions."""
        return cls(())

    def lookup(self, file_path: str | PurePath, line: int, kind: str) -> bool:
        """Check if (file, line, kind) is an accepted exception.

        Args:
            file_path: Relative path (str or Path, compared as POSIX)
            line: 1-based line number
            kind: Rule kind tag

        Returns:
            True iff this exact triple is in the registry
        """
        return (_posix(file_path), line, kind) in self._by_key

    def is_exempt(self, violation: StyleViolation) -> bool:
        """Check if violation is an accepted exception."""
        return violation.key in self._by_key

    def all_records(self) -> tuple[ExceptionRecord, ...]:
        """All records in load order."""
        return self._records

    def stale_records(self, violations: Iterable[StyleViolation]) -> tuple[ExceptionRecord, ...]:
        """Find records that no longer correspond to a violation.

        Args:
            violations: All current violations (exempted or not)

        Returns:
            Records whose key matches no violation, in load order
        """
        current = {v.key for v in violations}
        return tuple(r for r in self._records if r.key not in current)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"ExceptionRegistry({len(self._records)} records)"


def _posix(file_path: str | PurePath) -> str:
    """Normalize path to POSIX string."""
    if isinstance(file_path, PurePath):
        return file_path.as_posix()
    return file_path
