"""Copyright header checker.

Expected header::

    /-
    Copyright (c) 2024 Jean Dupont. All rights reserved.
    Released under Apache 2.0 license as described in the file LICENSE.
    Authors: Jean Dupont, Иван Иванович Иванов
    -/
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from stylecheck.application.checkers._base import BaseChecker, strip_eol
from stylecheck.domain.model.rule_kinds import DEFAULT_MESSAGES, ERR_AUT, ERR_COP
from stylecheck.domain.model.violation import StyleViolation

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from stylecheck.domain.model.configuration import LintConfig

HEADER_OPEN = "/-"
HEADER_CLOSE = "-/"
LICENSE_LINE = "Released under Apache 2.0 license as described in the file LICENSE."

_COPYRIGHT_PATTERN = re.compile(r"^Copyright \(c\) \d{4}(-\d{4})? \S.*\. All rights reserved\.$")
_AUTHORS_PREFIX = "Authors: "

# Predicates for the first four header lines, in order
_HEADER_LINES: tuple[Callable[[str], bool], ...] = (
    lambda line: line == HEADER_OPEN,
    lambda line: _COPYRIGHT_PATTERN.match(line) is not None,
    lambda line: line == LICENSE_LINE,
    lambda line: line.startswith(_AUTHORS_PREFIX),
)


class CopyrightChecker(BaseChecker):
    """Check the copyright header at the top of each file.

    ERR_COP is reported at the first line that deviates from the header.
    ERR_AUT is reported when the authors list ends with a period or
    joins names with " and ".
    """

    kinds = frozenset({ERR_COP, ERR_AUT})

    def check(
        self,
        file_path: str,
        lines: Sequence[str],
        config: LintConfig,
    ) -> tuple[StyleViolation, ...]:
        text = [strip_eol(line) for line in lines]

        def malformed(line_no: int) -> tuple[StyleViolation, ...]:
            return (StyleViolation(file_path, line_no, ERR_COP, DEFAULT_MESSAGES[ERR_COP]),)

        for index, matches in enumerate(_HEADER_LINES):
            # A file that ends inside the header deviates at its last line
            if index >= len(text):
                return malformed(max(len(text), 1))
            if not matches(text[index]):
                return malformed(index + 1)

        # Authors may continue over several lines before the closing -/
        authors = [text[3].removeprefix(_AUTHORS_PREFIX)]
        close = None
        for index in range(4, len(text)):
            if text[index] == HEADER_CLOSE:
                close = index
                break
            authors.append(text[index].strip())

        if close is None:
            return malformed(len(text))

        joined = " ".join(authors).strip()
        if not joined or joined.endswith(".") or " and " in joined:
            return (StyleViolation(file_path, 4, ERR_AUT, DEFAULT_MESSAGES[ERR_AUT]),)

        return ()
