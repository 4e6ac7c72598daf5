"""Rule kind tags.

Rule kinds are an open, string-tagged set: the constants below are the
built-in kinds, but exception lists and custom checkers may use any
well-formed tag.
"""

import re
from types import MappingProxyType

_RULE_KIND_PATTERN = re.compile(r"^[A-Z][A-Z0-9_]*$")

ERR_COP = "ERR_COP"  # copyright header
ERR_AUT = "ERR_AUT"  # authors line
ERR_MOD = "ERR_MOD"  # module docstring
ERR_LIN = "ERR_LIN"  # line length
ERR_NUM_LIN = "ERR_NUM_LIN"  # file length
ERR_TWS = "ERR_TWS"  # trailing whitespace
ERR_WIN = "ERR_WIN"  # windows line endings
ERR_STR = "ERR_STR"  # forbidden string

DEFAULT_MESSAGES = MappingProxyType(
    {
        ERR_COP: "Malformed or missing copyright header",
        ERR_AUT: "Authors line should look like: 'Authors: Jean Dupont, Иван Иванович Иванов'",
        ERR_MOD: "Module docstring missing, or too late",
        ERR_LIN: "Line has more than the allowed number of characters",
        ERR_NUM_LIN: "File is too long, try to split it up",
        ERR_TWS: "Trailing whitespace detected on line",
        ERR_WIN: "Windows line endings (\\r\\n) detected",
        ERR_STR: "Forbidden string found",
    },
)


def is_rule_kind(tag: str) -> bool:
    """Check if tag is a well-formed rule kind (e.g. ERR_COP).

    Args:
        tag: Candidate rule kind

    Returns:
        True if tag is uppercase letters, digits and underscores,
        starting with a letter
    """
    return bool(_RULE_KIND_PATTERN.match(tag))
