"""
password_strength: offline password strength from character categories.

>>> from password_strength import estimate
>>> estimate("1").bits
3
"""

from .categories import Category, categorize
from .errors import (
    ComputationInvalidError,
    InputClosedError,
    InputReadError,
    PasswordStrengthError,
)
from .estimator import (
    CharacterClassPresence,
    StrengthEstimate,
    alphabet_size,
    bit_strength,
    classify,
    combination_count,
    estimate,
    max_supported_length,
)
from .prompt import LineReader, PasswordPrompt, TerminalLineReader
from .report import format_combinations, render_report

__version__ = "0.1.0"

__all__ = [
    "Category",
    "categorize",
    "CharacterClassPresence",
    "StrengthEstimate",
    "alphabet_size",
    "bit_strength",
    "classify",
    "combination_count",
    "estimate",
    "max_supported_length",
    "LineReader",
    "PasswordPrompt",
    "TerminalLineReader",
    "format_combinations",
    "render_report",
    "PasswordStrengthError",
    "InputReadError",
    "InputClosedError",
    "ComputationInvalidError",
]
