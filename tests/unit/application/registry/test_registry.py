"""Tests for registry/registry.py."""

from pathlib import Path, PurePosixPath

import pytest

from stylecheck.application.registry.registry import ExceptionRegistry
from stylecheck.domain.exceptions.config import ConfigLoadError
from stylecheck.domain.exceptions.registry import MalformedExceptionRecordError
from tests.factories import make_record, make_violation


class TestLookup:
    """Tests for ExceptionRegistry.lookup."""

    def test_present_key(self) -> None:
        registry = ExceptionRegistry.from_text("X.ext : 4 : ERR_COP : bad header")

        assert registry.lookup("X.ext", 4, "ERR_COP")

    def test_different_line(self) -> None:
        registry = ExceptionRegistry.from_text("X.ext : 4 : ERR_COP : bad header")

        assert not registry.lookup("X.ext", 5, "ERR_COP")

    def test_different_kind(self) -> None:
        registry = ExceptionRegistry.from_text("X.ext : 4 : ERR_COP : bad header")

        assert not registry.lookup("X.ext", 4, "ERR_LIN")

    def test_different_file(self) -> None:
        registry = ExceptionRegistry.from_text("X.ext : 4 : ERR_COP : bad header")

        assert not registry.lookup("Y.ext", 4, "ERR_COP")

    def test_accepts_path_objects(self) -> None:
        registry = ExceptionRegistry([make_record("Mathlib/A.lean", 1, "ERR_COP")])

        assert registry.lookup(PurePosixPath("Mathlib/A.lean"), 1, "ERR_COP")
        assert registry.lookup(Path("Mathlib") / "A.lean", 1, "ERR_COP")

    def test_is_exempt(self) -> None:
        registry = ExceptionRegistry([make_record("A.lean", 3, "ERR_LIN")])

        assert registry.is_exempt(make_violation("A.lean", 3, "ERR_LIN", "other message"))
        assert not registry.is_exempt(make_violation("A.lean", 4, "ERR_LIN"))

    def test_empty_registry(self) -> None:
        registry = ExceptionRegistry.empty()

        assert len(registry) == 0
        assert not registry.lookup("X.lean", 1, "ERR_COP")


class TestConstruction:
    """Tests for ExceptionRegistry constructors."""

    def test_all_records_in_load_order(self) -> None:
        records = [make_record("B.lean"), make_record("A.lean")]

        registry = ExceptionRegistry(records)

        assert registry.all_records() == tuple(records)

    def test_duplicate_records_raise(self) -> None:
        with pytest.raises(MalformedExceptionRecordError, match="duplicate"):
            ExceptionRegistry([make_record("A.lean"), make_record("A.lean")])

    def test_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "style-exceptions.txt"
        path.write_text("Mathlib/A.lean : line 1 : ERR_COP : bad\n", encoding="utf-8")

        registry = ExceptionRegistry.from_file(path)

        assert registry.lookup("Mathlib/A.lean", 1, "ERR_COP")

    def test_from_file_reports_path_in_errors(self, tmp_path: Path) -> None:
        path = tmp_path / "style-exceptions.txt"
        path.write_text("Mathlib/A.lean : line 0 : ERR_COP : bad\n", encoding="utf-8")

        with pytest.raises(MalformedExceptionRecordError) as exc_info:
            ExceptionRegistry.from_file(path)

        assert exc_info.value.source == str(path)

    def test_missing_file_raises_config_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="exception list not found"):
            ExceptionRegistry.from_file(tmp_path / "missing.txt")


class TestStaleRecords:
    """Tests for ExceptionRegistry.stale_records."""

    def test_records_without_violation_are_stale(self) -> None:
        kept = make_record("A.lean", 1, "ERR_COP")
        gone = make_record("A.lean", 7, "ERR_LIN")
        registry = ExceptionRegistry([kept, gone])

        stale = registry.stale_records([make_violation("A.lean", 1, "ERR_COP")])

        assert stale == (gone,)

    def test_nothing_stale(self) -> None:
        registry = ExceptionRegistry([make_record("A.lean", 1, "ERR_COP")])

        assert registry.stale_records([make_violation("A.lean", 1, "ERR_COP")]) == ()

    def test_no_violations_everything_stale(self) -> None:
        records = [make_record("A.lean", 1), make_record("B.lean", 1)]
        registry = ExceptionRegistry(records)

        assert registry.stale_records([]) == tuple(records)
