"""
categories.py

Aim:
1) Defines the closed set of character categories a password is scanned for.
2) Keeps the per-category weight (alphabet contribution) next to the category.
3) Maps a single character to exactly one category, first match wins.

Precedence
digit -> lowercase -> uppercase -> symbol -> space -> tab -> other

Predicates follow the C locale: digits are 0-9, letters are a-z / A-Z and
symbols are the 32 printable punctuation characters. Everything else
(control codes, DEL) is OTHER.

Quick start
>>> from password_strength.categories import Category, categorize
>>> categorize("7")
<Category.DIGIT: 'digit'>
>>> Category.SYMBOL.weight
32
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Tuple
import string


class Category(Enum):
    DIGIT = "digit"
    LOWER = "lowercase"
    UPPER = "uppercase"
    SYMBOL = "symbol"
    SPACE = "space"
    TAB = "tab"
    OTHER = "other"

    @property
    def weight(self) -> int:
        """Number of symbols this category adds to the alphabet."""
        return WEIGHTS[self]


#Weights 
# OTHER is an arbitrary floor; extended characters could be far more numerous.
WEIGHTS = {
    Category.DIGIT: 10,
    Category.LOWER: 26,
    Category.UPPER: 26,
    Category.SYMBOL: 32,
    Category.SPACE: 1,
    Category.TAB: 1,
    Category.OTHER: 1,
}


#Dispatch 
_DIGITS = frozenset(string.digits)
_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_SYMBOLS = frozenset(string.punctuation)

# Ordered; OTHER is the fallthrough and has no predicate.
_DISPATCH: List[Tuple[Category, Callable[[str], bool]]] = [
    (Category.DIGIT, _DIGITS.__contains__),
    (Category.LOWER, _LOWER.__contains__),
    (Category.UPPER, _UPPER.__contains__),
    (Category.SYMBOL, _SYMBOLS.__contains__),
    (Category.SPACE, lambda ch: ch == " "),
    (Category.TAB, lambda ch: ch == "\t"),
]


def categorize(ch: str) -> Category:
    """Return the single category `ch` belongs to."""
    if len(ch) != 1:
        raise ValueError("categorize expects exactly one character")
    for category, matches in _DISPATCH:
        if matches(ch):
            return category
    return Category.OTHER


__all__ = [
    "Category",
    "WEIGHTS",
    "categorize",
]
