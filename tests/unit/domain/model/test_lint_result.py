"""Tests for domain/model/lint_result.py."""

import pytest

from stylecheck.domain.model.lint_result import LintResult
from tests.factories import make_violation


class TestLintResult:
    """Tests for LintResult aggregate."""

    def test_empty_passes(self) -> None:
        result = LintResult.empty()
        assert result.passed
        assert result.files_checked == 0

    def test_new_violation_fails(self) -> None:
        result = LintResult(violations=(make_violation(),), suppressed=(), files_checked=1)
        assert not result.passed

    def test_suppressed_only_passes(self) -> None:
        result = LintResult(violations=(), suppressed=(make_violation(),), files_checked=1)
        assert result.passed

    def test_all_violations(self) -> None:
        new = make_violation(line=1)
        old = make_violation(line=2)
        result = LintResult(violations=(new,), suppressed=(old,), files_checked=1)
        assert result.all_violations == (new, old)

    def test_negative_files_checked_raises(self) -> None:
        with pytest.raises(ValueError, match="files_checked"):
            LintResult(violations=(), suppressed=(), files_checked=-1)
