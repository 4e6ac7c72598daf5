"""End-to-end tests: discovery, linting and exceptions on a real directory tree.

Builds a small workspace in tmp_path and drives the public API.
"""

import shutil
import subprocess
from pathlib import Path

import pytest

from stylecheck import ExceptionRegistry, list_files, list_modules, resolve_build_libraries
from stylecheck.application.discovery import sync_aggregator
from stylecheck.application.services import audit_exceptions, lint_roots
from stylecheck.domain.model import LintConfig
from stylecheck.infrastructure import LakefileWorkspaceLoader
from tests.factories import CLEAN_SOURCE, write_file


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Workspace with root A, its aggregator A.lean and module A/B.lean."""
    (tmp_path / "lakefile.toml").write_text(
        'name = "demo"\n\n[[lean_lib]]\nname = "A"\n',
        encoding="utf-8",
    )
    write_file(tmp_path, "A.lean", "import A.B\n")
    write_file(tmp_path, "A/B.lean")
    return tmp_path


class TestDiscovery:
    """Discovery excludes the aggregator and maps paths to modules."""

    def test_list_files_excludes_aggregator(self, workspace: Path) -> None:
        assert [p.as_posix() for p in list_files("A", base_dir=workspace)] == ["A/B.lean"]

    def test_list_modules(self, workspace: Path) -> None:
        assert list_modules("A", base_dir=workspace) == ("A.B",)

    def test_other_project_libraries_unchanged(self, workspace: Path) -> None:
        assert resolve_build_libraries(LakefileWorkspaceLoader(workspace)) == ("A",)

    def test_aggregator_up_to_date(self, workspace: Path) -> None:
        assert sync_aggregator("A", check=True, base_dir=workspace) is True


@pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")
class TestGitDiscovery:
    """Discovery through a real git repository."""

    def test_only_tracked_files(self, workspace: Path) -> None:
        write_file(workspace, "A/Untracked.lean")
        git = ["git", "-c", "user.name=t", "-c", "user.email=t@example.com"]
        subprocess.run([*git, "init", "-q"], cwd=workspace, check=True)
        subprocess.run([*git, "add", "A.lean", "A/B.lean"], cwd=workspace, check=True)

        files = list_files("A", use_git=True, base_dir=workspace)

        assert [p.as_posix() for p in files] == ["A/B.lean"]

    def test_non_ascii_file_matches_walk(self, workspace: Path) -> None:
        write_file(workspace, "A/Café.lean")
        subprocess.run(["git", "init", "-q"], cwd=workspace, check=True)
        subprocess.run(["git", "add", "-A"], cwd=workspace, check=True)

        tracked = list_files("A", use_git=True, base_dir=workspace)

        assert tracked == list_files("A", base_dir=workspace)
        assert "A/Café.lean" in [p.as_posix() for p in tracked]

    def test_deleted_tracked_file_dropped(self, workspace: Path) -> None:
        write_file(workspace, "A/Gone.lean")
        subprocess.run(["git", "init", "-q"], cwd=workspace, check=True)
        subprocess.run(["git", "add", "-A"], cwd=workspace, check=True)
        (workspace / "A" / "Gone.lean").unlink()

        assert list_modules("A", use_git=True, base_dir=workspace) == ("A.B",)


class TestLintWithExceptions:
    """Exception registry suppresses exactly the listed findings."""

    def test_registered_violation_suppressed(self, workspace: Path) -> None:
        write_file(workspace, "A/C.lean", CLEAN_SOURCE.replace("/-!", "/-"))
        registry = ExceptionRegistry.from_text(
            "A/C.lean : line 8 : ERR_MOD : Missing module docstring\n",
        )

        result = lint_roots(["A"], registry, LintConfig(), base_dir=workspace)

        assert result.passed
        assert [(v.file_path, v.line, v.kind) for v in result.suppressed] == [
            ("A/C.lean", 8, "ERR_MOD"),
        ]

    def test_fixed_violation_becomes_stale(self, workspace: Path) -> None:
        registry = ExceptionRegistry.from_text(
            "A/B.lean : line 8 : ERR_MOD : Missing module docstring\n",
        )

        stale = audit_exceptions(["A"], registry, LintConfig(), base_dir=workspace)

        assert [str(r) for r in stale] == [
            "A/B.lean : line 8 : ERR_MOD : Missing module docstring",
        ]
