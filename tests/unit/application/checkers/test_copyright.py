"""Tests for checkers/copyright.py."""

import pytest

from stylecheck.application.checkers.copyright import CopyrightChecker
from stylecheck.domain.model.configuration import LintConfig
from stylecheck.domain.model.rule_kinds import ERR_AUT, ERR_COP
from tests.factories import CLEAN_SOURCE, HEADER, lines_of

LICENSE = "Released under Apache 2.0 license as described in the file LICENSE.\n"


def check(content: str) -> list[tuple[int, str]]:
    """Run checker, return (line, kind) pairs."""
    violations = CopyrightChecker().check("Mathlib/Test.lean", lines_of(content), LintConfig())
    return [(v.line, v.kind) for v in violations]


class TestCopyrightChecker:
    """Tests for CopyrightChecker."""

    def test_clean_header(self) -> None:
        assert check(CLEAN_SOURCE) == []

    def test_missing_header(self) -> None:
        assert check("import Mathlib.Logic.Basic\n") == [(1, ERR_COP)]

    def test_empty_file(self) -> None:
        assert check("") == [(1, ERR_COP)]

    def test_short_file_reports_deviating_line(self) -> None:
        content = "/-\nCopyright (c) 2024 Jean Dupont. All rights reserved.\nReleased under MIT.\n"

        assert check(content) == [(3, ERR_COP)]

    def test_short_file_ending_inside_header(self) -> None:
        content = "/-\nCopyright (c) 2024 Jean Dupont. All rights reserved.\n"

        assert check(content) == [(2, ERR_COP)]

    def test_header_without_closing_line(self) -> None:
        content = "/-\nCopyright (c) 2024 Jean Dupont. All rights reserved.\n" + LICENSE
        content += "Authors: Jean Dupont\n"

        assert check(content) == [(4, ERR_COP)]

    def test_bad_copyright_line(self) -> None:
        content = "/-\nCopyright 2024 Jean Dupont\n" + LICENSE + "Authors: Jean Dupont\n-/\n"

        assert check(content) == [(2, ERR_COP)]

    def test_year_range_allowed(self) -> None:
        content = (
            "/-\nCopyright (c) 2018-2024 Jean Dupont. All rights reserved.\n"
            + LICENSE
            + "Authors: Jean Dupont\n-/\n"
        )

        assert check(content) == []

    def test_bad_license_line(self) -> None:
        content = (
            "/-\nCopyright (c) 2024 Jean Dupont. All rights reserved.\n"
            "Released under MIT.\nAuthors: Jean Dupont\n-/\n"
        )

        assert check(content) == [(3, ERR_COP)]

    def test_missing_authors_line(self) -> None:
        content = (
            "/-\nCopyright (c) 2024 Jean Dupont. All rights reserved.\n"
            + LICENSE
            + "Author: Jean Dupont\n-/\n"
        )

        assert check(content) == [(4, ERR_COP)]

    def test_unclosed_header(self) -> None:
        content = (
            "/-\nCopyright (c) 2024 Jean Dupont. All rights reserved.\n"
            + LICENSE
            + "Authors: Jean Dupont\n\ntheorem foo : True := trivial\n"
        )

        assert check(content) == [(6, ERR_COP)]

    def test_multiline_authors(self) -> None:
        content = (
            "/-\nCopyright (c) 2024 Jean Dupont. All rights reserved.\n"
            + LICENSE
            + "Authors: Jean Dupont,\n  Иван Иванович Иванов\n-/\n"
        )

        assert check(content) == []

    @pytest.mark.parametrize(
        "authors",
        ["Authors: Jean Dupont.", "Authors: Jean Dupont and Ivan Ivanov"],
    )
    def test_malformed_authors(self, authors: str) -> None:
        content = (
            "/-\nCopyright (c) 2024 Jean Dupont. All rights reserved.\n"
            + LICENSE
            + f"{authors}\n-/\n"
        )

        assert check(content) == [(4, ERR_AUT)]

    def test_windows_line_endings_accepted(self) -> None:
        """Line endings are reported by WhitespaceChecker, not here."""
        assert check(HEADER.replace("\n", "\r\n")) == []

    def test_disabled_when_kinds_filtered_out(self) -> None:
        config = LintConfig(kinds=frozenset({"ERR_LIN"}))

        assert CopyrightChecker.from_config(config) is None

    def test_enabled_for_either_kind(self) -> None:
        config = LintConfig(kinds=frozenset({ERR_AUT}))

        assert isinstance(CopyrightChecker.from_config(config), CopyrightChecker)
