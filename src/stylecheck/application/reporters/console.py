"""Console reporter: LintResult → rich formatted string."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from stylecheck.domain.model.lint_result import LintResult
    from stylecheck.domain.model.violation import StyleViolation


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        show_suppressed: Also list violations exempted by the exception list.
        max_violations: Max violations to display. None = unlimited.
        width: Console width in characters.
    """

    show_suppressed: bool = False
    max_violations: int | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_violations is not None and self.max_violations < 0:
            raise ValueError(f"max_violations must be >= 0, got {self.max_violations}")
        if self.width < 40:
            raise ValueError(f"width must be >= 40, got {self.width}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: LintResult) -> str:
        """Format lint result as rich formatted string.

        Args:
            result: Lint result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        self._render_header(console, result)

        if result.violations:
            self._render_table(console, "NEW VIOLATIONS", result.violations, "bold red")

        if self._config.show_suppressed and result.suppressed:
            self._render_table(console, "SUPPRESSED", result.suppressed, "dim")

        if result.passed:
            console.print("Result: [bold green]PASSED[/bold green]")
        else:
            console.print("Result: [bold red]FAILED[/bold red]")

        return output.getvalue()

    def _render_header(self, console: Console, result: LintResult) -> None:
        """Render header with summary."""
        console.print()
        console.rule("[bold]STYLE CHECK[/bold]")
        console.print()

        parts = [
            f"[bold]Files:[/bold] {result.files_checked}",
            f"[bold]New:[/bold] {len(result.violations)}",
            f"[bold]Suppressed:[/bold] {len(result.suppressed)}",
        ]
        console.print("  ".join(parts))

        by_kind = Counter(v.kind for v in result.violations)
        if by_kind:
            kind_parts = [f"{k}: {n}" for k, n in sorted(by_kind.items())]
            console.print(f"({', '.join(kind_parts)})")

        console.print()

    def _render_table(
        self,
        console: Console,
        title: str,
        violations: tuple[StyleViolation, ...],
        style: str,
    ) -> None:
        """Render violations as table, limited by max_violations."""
        limit = self._config.max_violations
        shown = violations if limit is None else violations[:limit]

        table = Table(title=title, title_style=style, show_lines=False)
        table.add_column("File", style="cyan", no_wrap=True)
        table.add_column("Line", justify="right")
        table.add_column("Kind", style="yellow")
        table.add_column("Message")

        for v in shown:
            table.add_row(v.file_path, str(v.line), v.kind, v.message)

        console.print(table)

        hidden = len(violations) - len(shown)
        if hidden:
            console.print(f"[dim]... and {hidden} more[/dim]")

        console.print()
