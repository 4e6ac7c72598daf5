"""Plain text reporter using print().

Prints one violation per line as ``path : line N : KIND : message``,
the same shape as the exception list.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from stylecheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from stylecheck.domain.model.lint_result import LintResult


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Violations go to output, the summary line goes to summary_output
    so that output can be redirected into an exception list.
    """

    def __init__(self, output: TextIO | None = None, summary_output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Violation stream (default: sys.stdout)
            summary_output: Summary stream (default: sys.stderr)
        """
        self._output = output if output is not None else sys.stdout
        self._summary_output = summary_output if summary_output is not None else sys.stderr

    def report(self, result: LintResult) -> None:
        """Report lint results as plain text.

        Args:
            result: Lint result
        """
        for violation in result.violations:
            print(violation, file=self._output)

        status = "PASSED" if result.passed else "FAILED"
        print(
            f"{status}: {len(result.violations)} new violation(s), "
            f"{len(result.suppressed)} suppressed, {result.files_checked} file(s) checked",
            file=self._summary_output,
        )
