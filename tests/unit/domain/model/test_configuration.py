"""Tests for domain/model/configuration.py."""

import pytest

from stylecheck.domain.model.configuration import LintConfig, PrimaryProjectSettings


class TestLintConfig:
    """Tests for LintConfig."""

    def test_defaults(self) -> None:
        config = LintConfig()
        assert config.extension == ".lean"
        assert config.max_line_length == 100
        assert config.kinds is None
        assert config.use_git is False

    def test_reports_all_kinds_by_default(self) -> None:
        assert LintConfig().reports("ERR_ANYTHING")

    def test_kinds_filter(self) -> None:
        config = LintConfig(kinds=frozenset({"ERR_COP"}))
        assert config.reports("ERR_COP")
        assert not config.reports("ERR_LIN")

    @pytest.mark.parametrize("extension", ["lean", ".", ""])
    def test_bad_extension_raises(self, extension: str) -> None:
        with pytest.raises(ValueError, match="extension"):
            LintConfig(extension=extension)

    def test_zero_line_length_raises(self) -> None:
        with pytest.raises(ValueError, match="max_line_length"):
            LintConfig(max_line_length=0)

    def test_zero_file_lines_raises(self) -> None:
        with pytest.raises(ValueError, match="max_file_lines"):
            LintConfig(max_file_lines=0)

    def test_malformed_kind_raises(self) -> None:
        with pytest.raises(ValueError, match="malformed rule kinds"):
            LintConfig(kinds=frozenset({"ERR_COP", "copyright"}))

    def test_empty_forbidden_string_raises(self) -> None:
        with pytest.raises(ValueError, match="forbidden_strings"):
            LintConfig(forbidden_strings=("#eval", ""))


class TestPrimaryProjectSettings:
    """Tests for PrimaryProjectSettings."""

    def test_defaults(self) -> None:
        settings = PrimaryProjectSettings()
        assert settings.primary_name == "mathlib"
        assert settings.excluded == frozenset({"Cache", "LongestPole"})
        assert settings.extra == "Mathlib/Tactic"

    def test_extra_excluded_raises(self) -> None:
        with pytest.raises(ValueError, match="must not be excluded"):
            PrimaryProjectSettings(excluded=frozenset({"Extra"}), extra="Extra")

    def test_empty_primary_name_raises(self) -> None:
        with pytest.raises(ValueError, match="primary_name"):
            PrimaryProjectSettings(primary_name="")
