"""
report.py: Render a StrengthEstimate as the two lines the user sees.

- Combinations are printed fixed-point with every integer digit, never in
  scientific notation (94**100 prints all 198 digits).
- An overflowed count is reported as effectively unbounded on both lines.

Quick start
>>> from password_strength.estimator import estimate
>>> from password_strength.report import render_report
>>> print("\\n".join(render_report(estimate("aA1!"))))
There are 78074896 combinations
That is equivalent to a key of 26 bits
"""

from __future__ import annotations

from typing import List
import numpy as np

from .estimator import MAX_COMBINATIONS, StrengthEstimate

UNBOUNDED_COMBINATIONS = "There are effectively unbounded combinations (more than {limit})"
UNBOUNDED_BITS = "That is equivalent to a key of effectively unbounded size (more than {bits} bits)"


def format_combinations(value) -> str:
    """Exact decimal digits of a finite count, no fraction, no exponent."""
    value = np.longdouble(value)
    if not np.isfinite(value):
        raise ValueError("only finite counts can be formatted")
    return np.format_float_positional(
        value, precision=0, unique=False, fractional=True, trim="-"
    )


def render_report(est: StrengthEstimate) -> List[str]:
    if est.unbounded:
        limit_bits = int(np.floor(np.log2(MAX_COMBINATIONS)))
        return [
            UNBOUNDED_COMBINATIONS.format(limit=np.format_float_scientific(MAX_COMBINATIONS, precision=3)),
            UNBOUNDED_BITS.format(bits=limit_bits),
        ]
    return [
        f"There are {format_combinations(est.combinations)} combinations",
        f"That is equivalent to a key of {est.bits} bits",
    ]


__all__ = [
    "format_combinations",
    "render_report",
]
