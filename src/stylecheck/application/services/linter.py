"""Linter service: run checkers, suppress accepted findings.

Orchestrates discovery, checkers and the exception registry.
FAIL-FIRST: DiscoveryError on unreadable files.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from stylecheck.application.checkers import checkers_from_config
from stylecheck.application.discovery.modules import list_files
from stylecheck.domain.exceptions.discovery import DiscoveryError
from stylecheck.domain.model.lint_result import LintResult

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from stylecheck.application.registry.registry import ExceptionRegistry
    from stylecheck.domain.model.configuration import LintConfig
    from stylecheck.domain.model.exception_record import ExceptionRecord
    from stylecheck.domain.model.violation import StyleViolation
    from stylecheck.domain.ports.checker import CheckerProtocol
    from stylecheck.domain.ports.file_lister import FileListerPort

logger = logging.getLogger(__name__)


def lint_paths(
    paths: Iterable[PurePath],
    registry: ExceptionRegistry,
    config: LintConfig,
    *,
    base_dir: Path | None = None,
    checkers: Sequence[CheckerProtocol] | None = None,
) -> LintResult:
    """Lint files and split violations into new and suppressed.

    Args:
        paths: File paths relative to base_dir
        registry: Accepted findings
        config: Linter configuration (kinds filter applies)
        base_dir: Workspace directory (default: current directory)
        checkers: Checkers to run (default: enabled built-in checkers)

    Returns:
        Lint result; passed iff no new violations

    Raises:
        DiscoveryError: If a file cannot be read
    """
    base = base_dir if base_dir is not None else Path.cwd()
    active = tuple(checkers) if checkers is not None else checkers_from_config(config)

    new: list[StyleViolation] = []
    suppressed: list[StyleViolation] = []
    count = 0

    for path in paths:
        file_path = PurePath(path).as_posix()
        lines = _read_lines(base / path)
        count += 1

        for checker in active:
            for violation in checker.check(file_path, lines, config):
                if not config.reports(violation.kind):
                    continue
                if registry.is_exempt(violation):
                    suppressed.append(violation)
                else:
                    new.append(violation)

    logger.debug(
        "linted %d files: %d new, %d suppressed violations",
        count,
        len(new),
        len(suppressed),
    )
    return LintResult(violations=tuple(new), suppressed=tuple(suppressed), files_checked=count)


def lint_roots(
    roots: Iterable[str | PurePath],
    registry: ExceptionRegistry,
    config: LintConfig,
    *,
    base_dir: Path | None = None,
    lister: FileListerPort | None = None,
) -> LintResult:
    """Lint every source file under the given library roots.

    Nested roots (Mathlib and Mathlib/Tactic) lint each file once.

    Raises:
        DiscoveryError: If discovery fails or a file cannot be read
    """
    paths: dict[Path, None] = {}
    for root in roots:
        found = list_files(
            root,
            use_git=config.use_git,
            extension=config.extension,
            base_dir=base_dir,
            lister=lister,
        )
        paths.update(dict.fromkeys(found))

    return lint_paths(paths, registry, config, base_dir=base_dir)


def audit_exceptions(
    roots: Iterable[str | PurePath],
    registry: ExceptionRegistry,
    config: LintConfig,
    *,
    base_dir: Path | None = None,
    lister: FileListerPort | None = None,
) -> tuple[ExceptionRecord, ...]:
    """Find exception records whose violation no longer exists.

    Only records for files under the given roots are audited, so a
    partial run never flags records of other libraries.

    Returns:
        Stale records in load order
    """
    roots = tuple(roots)
    result = lint_roots(roots, registry, config, base_dir=base_dir, lister=lister)
    stale = registry.stale_records(result.all_violations)

    return tuple(r for r in stale if _in_scope(r, roots, config))


def out_of_scope_records(
    roots: Iterable[str | PurePath],
    registry: ExceptionRegistry,
    config: LintConfig,
) -> tuple[ExceptionRecord, ...]:
    """Records a run over roots with config neither confirms nor refutes.

    These survive an exception list rewrite: files outside the roots
    and kinds filtered out by config.kinds were not checked.

    Returns:
        Out-of-scope records in load order
    """
    roots = tuple(roots)
    return tuple(r for r in registry.all_records() if not _in_scope(r, roots, config))


def _in_scope(
    record: ExceptionRecord,
    roots: tuple[str | PurePath, ...],
    config: LintConfig,
) -> bool:
    """Check if a run over roots with config checks this record."""
    under_root = any(record.file_path.startswith(f"{PurePath(r).as_posix()}/") for r in roots)
    return under_root and config.reports(record.kind)


def _read_lines(path: Path) -> list[str]:
    """Read file keeping line endings (\\r\\n is reported, not normalized)."""
    try:
        with path.open(encoding="utf-8", newline="") as f:
            return f.readlines()
    except FileNotFoundError as e:
        raise DiscoveryError(path, "file not found") from e
    except PermissionError as e:
        raise DiscoveryError(path, "permission denied") from e
    except UnicodeDecodeError as e:
        raise DiscoveryError(path, f"encoding error: {e}") from e
