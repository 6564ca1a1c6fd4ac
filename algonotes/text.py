"""String puzzles: repeated substrings, isomorphism, windows, DNA and prefixes."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from itertools import takewhile

_DNA_WINDOW = 10
_NUCLEOTIDES = frozenset("ACGT")


def count_repeated_substrings(s: str) -> int:
    """Count the distinct substrings of ``s`` that occur again further on.

    A substring starting at ``i`` counts when it appears again after its own
    end. Lengths run up to half of ``s``; for each start the search stops at
    the first length that does not repeat, since no longer one can.
    """
    found: set[str] = set()
    half = len(s) // 2
    for start in range(len(s)):
        for length in range(1, min(half, len(s) - start) + 1):
            end = start + length
            piece = s[start:end]
            if piece not in s[end:]:
                break
            found.add(piece)
    return len(found)


def is_isomorphic(s: str, t: str) -> bool:
    """Return whether the characters of ``s`` map one to one onto those of ``t``."""
    if len(s) != len(t):
        return False
    first_in_s: dict[str, int] = {}
    first_in_t: dict[str, int] = {}
    for index, (a, b) in enumerate(zip(s, t)):
        seen_a = first_in_s.get(a)
        seen_b = first_in_t.get(b)
        if seen_a is None and seen_b is None:
            first_in_s[a] = index
            first_in_t[b] = index
        elif seen_a != seen_b:
            return False
    return True


def length_of_longest_substring(s: str) -> int:
    """Return the length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    window_start = -1
    best = 0
    for index, char in enumerate(s):
        window_start = max(window_start, last_seen.get(char, -1))
        best = max(best, index - window_start)
        last_seen[char] = index
    return best


def find_repeated_dna_sequences(s: str) -> list[str]:
    """Return every 10-letter sequence that occurs more than once, sorted.

    Any character other than A, C, G or T is read as A.
    """
    if len(s) < _DNA_WINDOW:
        return []
    normalized = "".join(char if char in _NUCLEOTIDES else "A" for char in s)
    windows = Counter(
        normalized[start:start + _DNA_WINDOW]
        for start in range(len(normalized) - _DNA_WINDOW + 1)
    )
    return sorted(sequence for sequence, count in windows.items() if count >= 2)


def str_str(haystack: str, needle: str) -> int:
    """Return the index of the first ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def longest_common_prefix(strs: Iterable[str]) -> str:
    """Return the longest prefix shared by all strings."""
    strings = list(strs)
    if not strings or not strings[0]:
        return ""
    prefix = strings[0]
    for other in strings[1:]:
        shared = sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(prefix, other)))
        if shared == 0:
            return ""
        prefix = prefix[:shared]
    return prefix