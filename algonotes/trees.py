"""Binary tree nodes, an in-order BST iterator and the right side view."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


class BSTIterator:
    """Iterate over a binary search tree from the smallest value upward."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._stack: list[TreeNode] = []
        self._push_left(root)

    def _push_left(self, node: Optional[TreeNode]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def has_next(self) -> bool:
        """Return whether a next smallest value remains."""
        return bool(self._stack)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if not self._stack:
            raise StopIteration
        node = self._stack.pop()
        self._push_left(node.right)
        return node.val


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the last value of each level, top to bottom."""
    if root is None:
        return []
    view = []
    level = deque([root])
    while level:
        view.append(level[-1].val)
        for _ in range(len(level)):
            node = level.popleft()
            if node.left is not None:
                level.append(node.left)
            if node.right is not None:
                level.append(node.right)
    return view