"""Tests for domain/model/workspace.py and domain/model/rule_kinds.py."""

import pytest

from stylecheck.domain.model.rule_kinds import DEFAULT_MESSAGES, ERR_COP, is_rule_kind
from stylecheck.domain.model.workspace import WorkspaceInfo


class TestWorkspaceInfo:
    """Tests for WorkspaceInfo."""

    def test_fields(self) -> None:
        info = WorkspaceInfo(name="mathlib", libraries=("Mathlib", "Cache"))
        assert info.name == "mathlib"
        assert info.libraries == ("Mathlib", "Cache")

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="name"):
            WorkspaceInfo(name="", libraries=())

    def test_empty_library_raises(self) -> None:
        with pytest.raises(ValueError, match="library names"):
            WorkspaceInfo(name="pkg", libraries=("Lib", ""))


class TestRuleKinds:
    """Tests for the rule kind catalog."""

    @pytest.mark.parametrize("tag", ["ERR_COP", "ERR_NUM_LIN", "E1", "CUSTOM"])
    def test_well_formed(self, tag: str) -> None:
        assert is_rule_kind(tag)

    @pytest.mark.parametrize("tag", ["", "err", "_ERR", "ERR COP", "1ERR"])
    def test_malformed(self, tag: str) -> None:
        assert not is_rule_kind(tag)

    def test_catalog_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_MESSAGES[ERR_COP] = "changed"  # type: ignore[index]

    def test_every_catalog_kind_is_well_formed(self) -> None:
        assert all(is_rule_kind(kind) for kind in DEFAULT_MESSAGES)
