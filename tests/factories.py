"""Test factories for creating domain objects and source trees.

Centralized factory functions to avoid duplication across test modules.
"""

from pathlib import Path

from stylecheck.domain.model.exception_record import ExceptionRecord
from stylecheck.domain.model.rule_kinds import ERR_COP
from stylecheck.domain.model.violation import StyleViolation

# Default test file path - consistent across all tests
DEFAULT_TEST_FILE = "Mathlib/Test.lean"

HEADER = (
    "/-\n"
    "Copyright (c) 2024 Jean Dupont. All rights reserved.\n"
    "Released under Apache 2.0 license as described in the file LICENSE.\n"
    "Authors: Jean Dupont, Иван Иванович Иванов\n"
    "-/\n"
)

CLEAN_SOURCE = (
    HEADER
    + "import Mathlib.Logic.Basic\n"
    + "\n"
    + "/-!\n"
    + "# Test file\n"
    + "-/\n"
    + "\n"
    + "theorem foo : True := trivial\n"
)


def make_violation(
    file_path: str = DEFAULT_TEST_FILE,
    line: int = 1,
    kind: str = ERR_COP,
    message: str = "Malformed or missing copyright header",
) -> StyleViolation:
    """Create a StyleViolation for tests."""
    return StyleViolation(file_path=file_path, line=line, kind=kind, message=message)


def make_record(
    file_path: str = DEFAULT_TEST_FILE,
    line: int = 1,
    kind: str = ERR_COP,
    message: str = "Malformed or missing copyright header",
) -> ExceptionRecord:
    """Create an ExceptionRecord for tests."""
    return ExceptionRecord(file_path=file_path, line=line, kind=kind, message=message)


def write_file(base: Path, relative: str, content: str = CLEAN_SOURCE) -> Path:
    """Write file under base, creating parent directories.

    Bytes are written as-is, so \\r\\n endings survive.

    Args:
        base: Workspace directory
        relative: POSIX path relative to base
        content: File contents (default: clean source)

    Returns:
        Absolute path of the written file
    """
    path = base / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content.encode("utf-8"))
    return path


def lines_of(content: str) -> list[str]:
    """Split content into lines keeping line endings, like the linter reads files."""
    return content.splitlines(keepends=True)
