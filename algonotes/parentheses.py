"""Balanced parentheses: generation, longest valid run and validation."""

from __future__ import annotations

_CLOSERS = {"(": ")", "[": "]", "{": "}"}


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses, in sorted order."""
    if n < 0:
        raise ValueError(f"number of pairs must not be negative, got {n}")
    results: list[str] = []

    def build(prefix: str, opened: int, closed: int) -> None:
        if opened == n and closed == n:
            results.append(prefix)
            return
        if opened < n:
            build(prefix + "(", opened + 1, closed)
        if closed < opened:
            build(prefix + ")", opened, closed + 1)

    build("", 0, 0)
    return results


def longest_valid_parentheses(s: str) -> int:
    """Return the length of the longest well-formed run, using a stack.

    Any character other than ``(`` is treated as a closing parenthesis.
    """
    stack: list[tuple[int, bool]] = []
    best = 0
    for index, char in enumerate(s):
        if char == "(":
            stack.append((index, False))
        elif not stack or stack[-1][1]:
            stack.append((index, True))
        else:
            stack.pop()
            length = index - stack[-1][0] if stack else index + 1
            best = max(best, length)
    return best


def longest_valid_parentheses_dp(s: str) -> int:
    """Return the length of the longest well-formed run, by dynamic programming."""
    ending_at = [0] * (len(s) + 1)
    best = 0
    for i in range(1, len(s) + 1):
        opener = i - 2 - ending_at[i - 1]
        if s[i - 1] == "(" or opener < 0 or s[opener] == ")":
            continue
        ending_at[i] = ending_at[i - 1] + 2 + ending_at[opener]
        best = max(best, ending_at[i])
    return best


def is_valid(s: str) -> bool:
    """Return whether every bracket in ``s`` is closed in the right order."""
    stack: list[str] = []
    for char in s:
        if stack and _CLOSERS.get(stack[-1]) == char:
            stack.pop()
        else:
            stack.append(char)
    return not stack