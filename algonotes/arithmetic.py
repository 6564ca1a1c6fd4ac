"""Integer puzzles: bit ranges, primes, factorial zeroes, happy numbers, division."""

from __future__ import annotations

import math

_HAPPY_ROUNDS = 50


def range_bitwise_and(m: int, n: int) -> int:
    """Return the bitwise AND of every integer from ``m`` to ``n`` inclusive."""
    if not m:
        return 0
    if m == n:
        return m
    offset = 0
    while m != n:
        m >>= 1
        n >>= 1
        offset += 1
    return m << offset


def _survives_trial_division(value: int) -> bool:
    limit = math.sqrt(value)
    divisor = 2
    while divisor < limit:
        if value % divisor == 0:
            return False
        divisor += 1
    return value % divisor != 0


def count_primes(n: int) -> int:
    """Count primes by trial division over the odd numbers from 5 below ``n``.

    Below 5 the answer comes from a fixed table: 0 under 2, 1 for 2 and 2 for 3 and 4.
    """
    if n < 2:
        return 0
    if n < 3:
        return 1
    if n < 4:
        return 2
    return 2 + sum(1 for value in range(5, n, 2) if _survives_trial_division(value))


def count_primes_sieve(n: int) -> int:
    """Count the primes strictly less than ``n`` with a sieve of Eratosthenes."""
    if n < 2:
        return 0
    composite = bytearray(n)
    for i in range(2, n):
        if i * i > n:
            break
        if not composite[i]:
            multiples = range(2 * i, n, i)
            composite[2 * i::i] = bytes(len(multiples))
            for multiple in multiples:
                composite[multiple] = 1
    return composite[2:].count(0)


def trailing_zeroes(n: int) -> int:
    """Return the number of trailing zeroes of ``n!``."""
    power = 5
    zeroes = 0
    while n >= power:
        zeroes += n // power
        power *= 5
    return zeroes


def _digit_square_sum(n: int) -> int:
    return sum(int(digit) ** 2 for digit in str(abs(n)))


def is_happy(n: int) -> bool:
    """Return whether repeatedly summing squared digits of ``n`` reaches 1.

    The search gives up, answering False, after a fixed number of rounds.
    """
    value = n
    for _ in range(_HAPPY_ROUNDS):
        if value == 1:
            return True
        value = _digit_square_sum(value)
    return value == 1


def divide(dividend: int, divisor: int) -> int:
    """Divide two integers by shifting and subtracting, truncating toward zero."""
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    remaining = abs(dividend)
    step = abs(divisor)
    quotient = 0
    while remaining >= step:
        shift = 0
        while remaining >= step << (shift + 1):
            shift += 1
        quotient += 1 << shift
        remaining -= step << shift
    if (dividend > 0 and divisor > 0) or (dividend < 0 and divisor < 0):
        return quotient
    return -quotient


def fraction_to_decimal(numerator: int, denominator: int) -> str:
    """Write a fraction as a decimal, putting a repeating part in parentheses."""
    if numerator == 0:
        return "0"
    if denominator == 0:
        raise ZeroDivisionError("denominator must not be zero")
    sign = "-" if (numerator < 0) != (denominator < 0) else ""
    n, d = abs(numerator), abs(denominator)
    whole, remainder = divmod(n, d)
    if remainder == 0:
        return f"{sign}{whole}"

    digits: list[str] = []
    seen: dict[int, int] = {}
    while remainder:
        if remainder in seen:
            start = seen[remainder]
            fixed = "".join(digits[:start])
            cycle = "".join(digits[start:])
            return f"{sign}{whole}.{fixed}({cycle})"
        seen[remainder] = len(digits)
        digit, remainder = divmod(remainder * 10, d)
        digits.append(str(digit))
    return f"{sign}{whole}.{''.join(digits)}"