"""Spreadsheet column titles, version comparison and the largest concatenation."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import cmp_to_key
from itertools import zip_longest

_ALPHABET = 26
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def title_to_number(s: str) -> int:
    """Return the column number of a spreadsheet title such as ``"AB"``."""
    number = 0
    for char in s:
        number = number * _ALPHABET + (ord(char) - ord("A") + 1)
    return number


def convert_to_title(n: int) -> str:
    """Return the spreadsheet title of column ``n``; zero gives an empty title."""
    if n < 0:
        raise ValueError(f"column number must not be negative, got {n}")
    letters = []
    while n:
        n, remainder = divmod(n - 1, _ALPHABET)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def compare_version(version1: str, version2: str) -> int:
    """Compare dotted version strings, returning -1, 0 or 1.

    Missing components count as zero, and each component is read as the
    integer at its start, so ``"1.2a"`` equals ``"1.2"``.
    """
    for first, second in zip_longest(version1.split("."), version2.split("."), fillvalue=""):
        a, b = _leading_int(first), _leading_int(second)
        if a != b:
            return 1 if a > b else -1
    return 0


def _concatenation_order(a: str, b: str) -> int:
    return (b + a > a + b) - (a + b > b + a)


def largest_number(nums: Iterable[int]) -> str:
    """Arrange non-negative integers to form the largest number, as a string."""
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("numbers must not be negative")
    if not any(values):
        return "0"
    texts = sorted(map(str, values), key=cmp_to_key(_concatenation_order))
    return "".join(texts)