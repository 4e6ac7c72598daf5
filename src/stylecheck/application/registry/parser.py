"""Exception list format: parse and render.

One record per line::

    Mathlib/Foo.lean : line 1 : ERR_COP : Malformed or missing copyright header
    Mathlib/Bar.lean : 17 : ERR_LIN : Line has more than 100 characters

Fields are split on the first three ':' delimiters, so the message
may itself contain ':'. The line field is either a bare number or
"line N". Lines starting with '#' and blank lines are ignored.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from stylecheck.domain.exceptions.registry import MalformedExceptionRecordError
from stylecheck.domain.model.exception_record import ExceptionRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

    from stylecheck.domain.model.exception_record import RecordKey
    from stylecheck.domain.model.violation import StyleViolation

COMMENT_PREFIX = "#"
FIELD_DELIMITER = ":"

_LINE_FIELD_PATTERN = re.compile(r"^(?:line\s+)?(-?\d+)$")


def parse_exceptions(text: str, source: str = "<string>") -> tuple[ExceptionRecord, ...]:
    """Parse exception list text into records.

    Args:
        text: Exception list contents
        source: Name used in error messages (usually the file path)

    Returns:
        Records in the order they appear

    Raises:
        MalformedExceptionRecordError: If any record is malformed or duplicated
    """
    records: list[ExceptionRecord] = []
    seen: dict[RecordKey, int] = {}

    for line_no, raw in enumerate(text.splitlines(), start=1):
        stripped = raw.strip()

        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue

        record = _parse_record(stripped, source, line_no)

        # Key must be unique: (file, line, kind)
        if record.key in seen:
            raise MalformedExceptionRecordError(
                source,
                line_no,
                f"duplicate of the record on line {seen[record.key]}",
            )
        seen[record.key] = line_no
        records.append(record)

    return tuple(records)


def render_exceptions(violations: Iterable[StyleViolation | ExceptionRecord]) -> str:
    """Render violations as an exception list.

    Sorted by (file, line, kind), duplicates collapsed.

    Args:
        violations: Violations to accept, or records to keep

    Returns:
        Exception list text, one record per line
    """
    unique = {v.key: v for v in violations}
    lines = [str(unique[key]) for key in sorted(unique)]
    return "".join(f"{line}\n" for line in lines)


def _parse_record(line: str, source: str, line_no: int) -> ExceptionRecord:
    """Parse one non-comment line."""
    fields = [f.strip() for f in line.split(FIELD_DELIMITER, 3)]
    if len(fields) != 4:
        raise MalformedExceptionRecordError(
            source,
            line_no,
            f"expected 'path : line : kind : message', got {line!r}",
        )

    file_path, line_field, kind, message = fields

    match = _LINE_FIELD_PATTERN.match(line_field)
    if match is None:
        raise MalformedExceptionRecordError(
            source,
            line_no,
            f"line number must be an integer, got {line_field!r}",
        )

    try:
        return ExceptionRecord(
            file_path=file_path,
            line=int(match.group(1)),
            kind=kind,
            message=message,
        )
    except ValueError as e:
        raise MalformedExceptionRecordError(source, line_no, str(e)) from e
