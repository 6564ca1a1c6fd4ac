"""Palindrome checks, partitions into palindromes and the fewest cuts."""

from __future__ import annotations


def is_palindrome(s: str) -> bool:
    """Return whether ``s`` reads the same backwards."""
    return s == s[::-1]


def partition(s: str) -> list[list[str]]:
    """Return every way of splitting ``s`` into palindromes.

    Partitions come out with shorter leading pieces first; an empty string
    has exactly one, empty, partition.
    """
    result: list[list[str]] = []
    parts: list[str] = []

    def extend(start: int) -> None:
        if start == len(s):
            result.append(list(parts))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if is_palindrome(piece):
                parts.append(piece)
                extend(end)
                parts.pop()

    extend(0)
    return result


def min_cut(s: str) -> int:
    """Return the fewest cuts that split ``s`` into palindromes; -1 for an empty string."""
    n = len(s)
    cuts = list(range(-1, n))
    for centre in range(n):
        for lo, hi in ((centre, centre), (centre, centre + 1)):
            while lo >= 0 and hi < n and s[lo] == s[hi]:
                cuts[hi + 1] = min(cuts[hi + 1], cuts[lo] + 1)
                lo -= 1
                hi += 1
    return cuts[n]