"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import zip_longest
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return "ListNode(" + " -> ".join(str(v) for v in self) + ")"


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode(0)
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [] if head is None else list(head)


def _relink(nodes: list[ListNode]) -> Optional[ListNode]:
    """Chain ``nodes`` together in the given order and return the new head."""
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    if nodes:
        nodes[-1].next = None
        return nodes[0]
    return None


def _nodes(head: Optional[ListNode]) -> list[ListNode]:
    result = []
    while head is not None:
        result.append(head)
        head = head.next
    return result


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse a list in place and return its new head."""
    reversed_head: Optional[ListNode] = None
    while head is not None:
        node = head
        head = head.next
        node.next = reversed_head
        reversed_head = node
    return reversed_head


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers whose digits are stored most significant first.

    The digits of the sum are returned least significant first.
    """
    digits = []
    carry = 0
    pairs = zip_longest(reversed(to_values(l1)), reversed(to_values(l2)), fillvalue=0)
    for a, b in pairs:
        carry, digit = divmod(a + b + carry, 10)
        digits.append(digit)
    if carry and digits:
        digits.append(carry)
    return from_values(digits)


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node holding ``val`` and return the new head."""
    dummy = ListNode(0, head)
    node = dummy
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def _is_ascending(node: ListNode) -> bool:
    return node.next is None or node.next.val >= node.val


def merge_two_lists(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Merge two sorted lists, ascending or descending, into one.

    The direction is taken from the first list of more than one node.
    Two single-node lists are simply joined, the first before the second.
    """
    if l1 is None:
        return l2
    if l2 is None:
        return l1
    if l1.next is None and l2.next is None:
        l1.next = l2
        return l1

    ascending = _is_ascending(l1 if l1.next is not None else l2)

    def second_goes_first(a: ListNode, b: ListNode) -> bool:
        return a.val > b.val if ascending else a.val < b.val

    dummy = ListNode(0)
    tail = dummy
    while l1 is not None and l2 is not None:
        if second_goes_first(l1, l2):
            tail.next, l2 = l2, l2.next
        else:
            tail.next, l1 = l1, l1.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Remove the ``n``-th node counted from the end and return the head.

    A single-node list always becomes empty.
    """
    if head is None:
        raise ValueError("cannot remove a node from an empty list")
    if head.next is None:
        return None
    nodes = _nodes(head)
    if not 1 <= n <= len(nodes):
        raise ValueError(f"n must be between 1 and {len(nodes)}, got {n}")
    step = len(nodes) - n
    if step == 0:
        return head.next
    nodes[step - 1].next = nodes[step].next
    return head


def reverse_k_group(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Reverse the nodes in consecutive groups of ``k``; a short tail stays as is."""
    if k < 1:
        raise ValueError(f"group size must be positive, got {k}")
    nodes = _nodes(head)
    full = len(nodes) // k * k
    ordered: list[ListNode] = []
    for start in range(0, full, k):
        ordered.extend(reversed(nodes[start:start + k]))
    ordered.extend(nodes[full:])
    return _relink(ordered)


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next