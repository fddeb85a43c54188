"""
estimator.py

Aim:
1) Scans a password and records which character categories it draws from.
2) Turns the observed categories into an alphabet size.
3) Computes the combination count alphabet_size ** length in extended precision.
4) Converts the count into an equivalent key size in bits.

Note:
- Combinations are held in `numpy.longdouble`. On x86 Linux that is 80-bit
  extended precision (max ~1.19e4932); where it is plain double (max ~1.8e308)
  long, diverse passwords saturate to infinity sooner. That is reported as an
  unbounded result, not as an error.
- 0 ** 0 == 1, so the empty password has one combination and 0 bits.

Quick start
>>> from password_strength.estimator import estimate
>>> est = estimate("aA1!")
>>> est.alphabet_size, int(est.combinations), est.bits
(94, 78074896, 26)

Step by step:
>>> from password_strength.estimator import classify, combination_count, bit_strength
>>> presence = classify("hello")
>>> bit_strength(combination_count(presence, 5))
23
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional
import logging
import numpy as np

from .categories import Category, categorize
from .errors import ComputationInvalidError

logger = logging.getLogger(__name__)

#Precision limits 
MAX_COMBINATIONS = np.finfo(np.longdouble).max


#Category presence 
@dataclass(frozen=True)
class CharacterClassPresence:
    """
    Which categories appeared at least once in the scanned input.

    Parameters

    categories : frozenset of Category
        Categories with one or more matching characters.
    """

    categories: FrozenSet[Category] = frozenset()

    def __contains__(self, category: Category) -> bool:
        return category in self.categories

    @property
    def digit(self) -> bool:
        return Category.DIGIT in self.categories

    @property
    def lower(self) -> bool:
        return Category.LOWER in self.categories

    @property
    def upper(self) -> bool:
        return Category.UPPER in self.categories

    @property
    def symbol(self) -> bool:
        return Category.SYMBOL in self.categories

    @property
    def space(self) -> bool:
        return Category.SPACE in self.categories

    @property
    def tab(self) -> bool:
        return Category.TAB in self.categories

    @property
    def other(self) -> bool:
        return Category.OTHER in self.categories

    @property
    def alphabet_size(self) -> int:
        """Sum of the weights of the present categories."""
        return sum(c.weight for c in self.categories)


def classify(password: str) -> CharacterClassPresence:
    """Scan `password` once and collect the categories it touches."""
    found = set()
    for ch in password:
        found.add(categorize(ch))
        if len(found) == len(Category):
            break
    return CharacterClassPresence(frozenset(found))


def alphabet_size(presence: CharacterClassPresence) -> int:
    """Weighted sum over the present categories (0 for empty input)."""
    return presence.alphabet_size


#Combinations and bits 
def combination_count(presence: CharacterClassPresence, length: int) -> np.longdouble:
    """
    alphabet_size ** length, in `numpy.longdouble`.

    Saturates to +inf when the result is out of range; callers detect that
    with `numpy.isinf` (see `bit_strength`).
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    base = np.longdouble(presence.alphabet_size)
    with np.errstate(over="ignore"):
        return np.power(base, np.longdouble(length))


def bit_strength(combinations) -> Optional[int]:
    """
    floor(log2(combinations)).

    Returns None when `combinations` saturated to infinity (unbounded result).
    Raises ComputationInvalidError for zero, negative or NaN input; the
    formula never produces those.
    """
    value = np.longdouble(combinations)
    if np.isnan(value) or value <= 0:
        raise ComputationInvalidError(
            f"combination count must be positive, got {combinations!r}"
        )
    if np.isinf(value):
        return None
    return int(np.floor(np.log2(value)))


def max_supported_length(size: int) -> Optional[int]:
    """
    Longest input length whose count stays finite for `size` on this platform.

    None when the count can never overflow (size 0 or 1).
    """
    if size < 0:
        raise ValueError("alphabet size must be non-negative")
    if size <= 1:
        return None
    limit = int(np.floor(np.log(MAX_COMBINATIONS) / np.log(np.longdouble(size))))
    base = np.longdouble(size)
    # the log ratio can land one off either way
    with np.errstate(over="ignore"):
        while np.isinf(np.power(base, np.longdouble(limit))):
            limit -= 1
        while not np.isinf(np.power(base, np.longdouble(limit + 1))):
            limit += 1
    return limit


#One-shot pipeline 
@dataclass(frozen=True)
class StrengthEstimate:
    presence: CharacterClassPresence
    length: int
    alphabet_size: int
    combinations: np.longdouble
    bits: Optional[int]

    @property
    def unbounded(self) -> bool:
        """True when the count overflowed and no finite bit value exists."""
        return self.bits is None


def estimate(password: str) -> StrengthEstimate:
    """
    Run classify -> alphabet size -> combinations -> bits once.

    The password itself is not kept on the result.
    """
    presence = classify(password)
    length = len(password)
    combinations = combination_count(presence, length)
    bits = bit_strength(combinations)
    logger.debug(
        "length=%d alphabet=%d bits=%s", length, presence.alphabet_size, bits
    )
    if bits is None:
        logger.info(
            "combination count exceeds %s; reporting as unbounded",
            "extended precision" if np.finfo(np.longdouble).maxexp > 1024 else "double precision",
        )
    return StrengthEstimate(
        presence=presence,
        length=length,
        alphabet_size=presence.alphabet_size,
        combinations=combinations,
        bits=bits,
    )


__all__ = [
    "MAX_COMBINATIONS",
    "CharacterClassPresence",
    "StrengthEstimate",
    "alphabet_size",
    "bit_strength",
    "classify",
    "combination_count",
    "estimate",
    "max_supported_length",
]
