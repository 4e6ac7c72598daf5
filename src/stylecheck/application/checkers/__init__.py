"""Line-oriented style checkers.

Each checker reports one or more rule kinds for a single file.
"""

from stylecheck.application.checkers._base import BaseChecker
from stylecheck.application.checkers._registry import checkers_from_config
from stylecheck.application.checkers.copyright import CopyrightChecker
from stylecheck.application.checkers.text import (
    FileLengthChecker,
    ForbiddenStringChecker,
    LineLengthChecker,
    ModuleDocstringChecker,
    WhitespaceChecker,
)

__all__ = [
    "BaseChecker",
    "CopyrightChecker",
    "FileLengthChecker",
    "ForbiddenStringChecker",
    "LineLengthChecker",
    "ModuleDocstringChecker",
    "WhitespaceChecker",
    "checkers_from_config",
]
