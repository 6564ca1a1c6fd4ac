"""Bit manipulation on unsigned 32-bit words."""

from __future__ import annotations

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1


def reverse_bits(n: int) -> int:
    """Reverse the bit order of ``n`` taken as an unsigned 32-bit word."""
    word = n & _WORD_MASK
    return int(f"{word:0{_WORD_BITS}b}"[::-1], 2)


def hamming_weight(n: int) -> int:
    """Count the set bits of ``n`` taken as an unsigned 32-bit word."""
    return bin(n & _WORD_MASK).count("1")