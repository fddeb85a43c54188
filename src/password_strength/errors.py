"""
errors.py: Exceptions raised by the estimator and the terminal shell.

- InputReadError: a line could not be read; the prompt loop retries.
- InputClosedError: the input stream ended before any line arrived.
- ComputationInvalidError: a non-positive count reached the log step.
"""

from __future__ import annotations


class PasswordStrengthError(Exception):
    """Base class for everything this package raises on purpose."""


class InputReadError(PasswordStrengthError):
    """Recoverable read failure; the partial line has been discarded."""


class InputClosedError(PasswordStrengthError):
    """End of input reached before a line could be read."""


class ComputationInvalidError(PasswordStrengthError, ValueError):
    """Combination count was zero, negative or NaN going into log2."""


__all__ = [
    "PasswordStrengthError",
    "InputReadError",
    "InputClosedError",
    "ComputationInvalidError",
]
