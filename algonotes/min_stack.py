"""A stack that also reports its smallest value."""

from __future__ import annotations


class MinStack:
    """A last-in first-out stack with constant-time access to its minimum."""

    def __init__(self) -> None:
        self._items: list[int] = []
        self._minimums: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._items.append(x)
        self._minimums.append(min(x, self._minimums[-1]) if self._minimums else x)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        self._minimums.pop()
        return self._items.pop()

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1]

    def get_min(self) -> int:
        """Return the smallest value on the stack, or 0 when it is empty."""
        return self._minimums[-1] if self._minimums else 0