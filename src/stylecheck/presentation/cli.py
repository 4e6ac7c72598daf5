"""stylecheck command-line interface (Typer).

Exit codes:
    0: success, no new violations
    1: new violations, stale exceptions, or out-of-date aggregator files
    2: fatal error (configuration, discovery, malformed exception list)
"""

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from stylecheck.application.discovery import (
    list_files,
    list_modules,
    resolve_build_libraries,
    sync_aggregator,
)
from stylecheck.application.registry import ExceptionRegistry, render_exceptions
from stylecheck.application.reporters import ConsoleConfig, ConsoleReporter, PlainTextReporter
from stylecheck.application.services import audit_exceptions, lint_roots, out_of_scope_records
from stylecheck.domain.exceptions import StyleCheckError
from stylecheck.domain.model import LintConfig
from stylecheck.infrastructure import LakefileWorkspaceLoader

DEFAULT_EXCEPTIONS = Path("scripts") / "style-exceptions.txt"

err_console = Console(stderr=True)

app = typer.Typer(
    name="stylecheck",
    help="Style linting and module discovery for Lean proof libraries.",
    add_completion=False,
    no_args_is_help=True,
)

WorkspaceOption = Annotated[
    Path,
    typer.Option("--workspace", "-C", help="Workspace directory (contains the lakefile)."),
]
GitOption = Annotated[
    bool,
    typer.Option("--git/--no-git", help="List files tracked by git instead of walking."),
]
ExtensionOption = Annotated[
    str,
    typer.Option("--ext", help="Source file extension."),
]
ExceptionsOption = Annotated[
    Path | None,
    typer.Option(
        "--exceptions",
        "-e",
        help=f"Exception list, relative to the workspace (default: {DEFAULT_EXCEPTIONS}).",
    ),
]
KindOption = Annotated[
    list[str] | None,
    typer.Option("--kind", "-k", help="Only report this rule kind (repeatable)."),
]
RootsArgument = Annotated[
    list[str] | None,
    typer.Argument(help="Library roots (default: libraries of the workspace)."),
]
MaxLineLengthOption = Annotated[int, typer.Option(help="Longest allowed line.")]


@app.callback()
def _main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    """Configure logging for all commands."""
    _configure_logging(verbose)


@app.command()
def lint(
    roots: RootsArgument = None,
    workspace: WorkspaceOption = Path("."),
    exceptions: ExceptionsOption = None,
    kind: KindOption = None,
    git: GitOption = False,
    extension: ExtensionOption = ".lean",
    max_line_length: MaxLineLengthOption = 100,
    update: Annotated[
        bool,
        typer.Option("--update", help="Rewrite the exception list with all current violations."),
    ] = False,
    output_format: Annotated[
        str,
        typer.Option("--format", help="Output format: plain or rich."),
    ] = "plain",
    show_suppressed: Annotated[
        bool,
        typer.Option("--show-suppressed", help="Also list suppressed violations (rich format)."),
    ] = False,
    max_violations: Annotated[
        int | None,
        typer.Option(min=0, help="Show at most this many violations per table (rich format)."),
    ] = None,
) -> None:
    """Lint source files; exit 1 on violations not in the exception list."""
    config = _build_config(kind, git, extension, max_line_length)
    exceptions_path = workspace / (exceptions or DEFAULT_EXCEPTIONS)

    try:
        registry = _load_registry(exceptions_path, required=exceptions is not None and not update)
        lint_targets = _roots(roots, workspace)
        result = lint_roots(lint_targets, registry, config, base_dir=workspace)

        if update:
            kept = out_of_scope_records(lint_targets, registry, config)
            exceptions_path.parent.mkdir(parents=True, exist_ok=True)
            exceptions_path.write_text(
                render_exceptions((*kept, *result.all_violations)),
                encoding="utf-8",
            )
            err_console.print(
                f"Wrote {len(result.all_violations)} exception(s) to {exceptions_path}"
                f" ({len(kept)} kept from other roots or kinds)",
            )
            return
    except (StyleCheckError, OSError) as e:
        _fail(e)

    match output_format:
        case "plain":
            PlainTextReporter().report(result)
        case "rich":
            console_config = ConsoleConfig(
                show_suppressed=show_suppressed,
                max_violations=max_violations,
            )
            typer.echo(ConsoleReporter(console_config).report(result), nl=False)
        case _:
            raise typer.BadParameter(f"unknown format {output_format!r}", param_hint="--format")

    if not result.passed:
        raise typer.Exit(1)


@app.command()
def files(
    root: Annotated[str, typer.Argument(help="Library root, e.g. Mathlib.")],
    workspace: WorkspaceOption = Path("."),
    git: GitOption = False,
    extension: ExtensionOption = ".lean",
) -> None:
    """List source files under a library root, one per line."""
    try:
        paths = list_files(root, use_git=git, extension=extension, base_dir=workspace)
    except StyleCheckError as e:
        _fail(e)

    for path in paths:
        typer.echo(path.as_posix())


@app.command()
def modules(
    root: Annotated[str, typer.Argument(help="Library root, e.g. Mathlib.")],
    workspace: WorkspaceOption = Path("."),
    git: GitOption = False,
    extension: ExtensionOption = ".lean",
) -> None:
    """List module names under a library root, one per line."""
    try:
        names = list_modules(root, use_git=git, extension=extension, base_dir=workspace)
    except StyleCheckError as e:
        _fail(e)

    for name in names:
        typer.echo(name)


@app.command()
def libs(workspace: WorkspaceOption = Path(".")) -> None:
    """List the build libraries of the workspace, one per line."""
    try:
        names = resolve_build_libraries(LakefileWorkspaceLoader(workspace))
    except StyleCheckError as e:
        _fail(e)

    for name in names:
        typer.echo(name)


@app.command("mk-all")
def mk_all(
    roots: RootsArgument = None,
    workspace: WorkspaceOption = Path("."),
    check: Annotated[
        bool,
        typer.Option("--check", help="Only verify, exit 1 if any aggregator is out of date."),
    ] = False,
    git: GitOption = False,
    extension: ExtensionOption = ".lean",
) -> None:
    """Write (or verify) the aggregator file importing every module of each library."""
    stale: list[str] = []

    try:
        for root in _roots(roots, workspace):
            up_to_date = sync_aggregator(
                root,
                check=check,
                use_git=git,
                extension=extension,
                base_dir=workspace,
            )
            if not up_to_date:
                stale.append(f"{root}{extension}")
    except StyleCheckError as e:
        _fail(e)

    for name in stale:
        typer.echo(f"{name} {'is out of date' if check else 'updated'}")

    if check and stale:
        raise typer.Exit(1)


@app.command("audit-exceptions")
def audit(
    roots: RootsArgument = None,
    workspace: WorkspaceOption = Path("."),
    exceptions: ExceptionsOption = None,
    git: GitOption = False,
    extension: ExtensionOption = ".lean",
    max_line_length: MaxLineLengthOption = 100,
) -> None:
    """Print exception records whose violation no longer exists; exit 1 if any."""
    config = _build_config(None, git, extension, max_line_length)

    try:
        exceptions_path = workspace / (exceptions or DEFAULT_EXCEPTIONS)
        registry = _load_registry(exceptions_path, required=exceptions is not None)
        stale = audit_exceptions(_roots(roots, workspace), registry, config, base_dir=workspace)
    except StyleCheckError as e:
        _fail(e)

    for record in stale:
        typer.echo(str(record))

    if stale:
        raise typer.Exit(1)


def main() -> None:
    """Console script entry point."""
    app()


def _build_config(
    kinds: list[str] | None,
    use_git: bool,
    extension: str,
    max_line_length: int,
) -> LintConfig:
    """Build LintConfig from options; invalid values are usage errors."""
    try:
        return LintConfig(
            extension=extension,
            max_line_length=max_line_length,
            kinds=frozenset(kinds) if kinds else None,
            use_git=use_git,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def _load_registry(path: Path, *, required: bool) -> ExceptionRegistry:
    """Load exception list; a missing default list means no exceptions."""
    if not required and not path.exists():
        logging.getLogger(__name__).debug("no exception list at %s", path)
        return ExceptionRegistry.empty()
    return ExceptionRegistry.from_file(path)


def _roots(roots: list[str] | None, workspace: Path) -> tuple[str, ...]:
    """Explicit roots, or the build libraries of the workspace."""
    if roots:
        return tuple(roots)
    return resolve_build_libraries(LakefileWorkspaceLoader(workspace))


def _fail(error: Exception) -> NoReturn:
    """Report fatal error and exit with status 2."""
    err_console.print(
        f"[bold red]error:[/bold red] {escape(str(error))}",
        highlight=False,
        soft_wrap=True,
    )
    raise typer.Exit(2) from error


def _configure_logging(verbose: bool) -> None:
    """Route stylecheck loggers to a rich handler on stderr."""
    logger = logging.getLogger("stylecheck")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
