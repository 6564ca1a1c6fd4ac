"""Array puzzles: sums, areas, robbing, majorities, rotation, medians and removals."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations, groupby


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Return the sum of three numbers that lies closest to ``target``.

    On a tie the first triple met, in index order, wins.
    """
    if len(nums) < 3:
        raise ValueError("at least three numbers are needed")
    return min(
        (sum(triple) for triple in combinations(nums, 3)),
        key=lambda total: abs(total - target),
    )


def max_area(height: Sequence[int]) -> int:
    """Return the most water held between two of the given walls."""
    best = 0
    start, end = 0, len(height) - 1
    while start < end:
        best = max(best, (end - start) * min(height[start], height[end]))
        if height[start] < height[end]:
            start += 1
        else:
            end -= 1
    return best


def rob(nums: Iterable[int]) -> int:
    """Return the largest total of values taken with no two adjacent."""
    before_previous, previous = 0, 0
    for value in nums:
        before_previous, previous = previous, max(before_previous + value, previous)
    return previous


def majority_element(nums: Sequence[int]) -> int:
    """Return the value that occurs more than half the time.

    The first value to pass half the length, in reading order, is returned.
    """
    guard = len(nums) // 2
    counts: Counter[int] = Counter()
    for value in nums:
        counts[value] += 1
        if counts[value] > guard:
            return value
    raise ValueError("no value occurs more than half the time")


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` in place ``k`` steps to the right."""
    if not nums:
        return
    step = k % len(nums)
    if step:
        nums[:] = nums[-step:] + nums[:-step]


def max_value_index(values: Sequence[int]) -> int:
    """Return the index of the largest value; the last one wins a tie."""
    if not values:
        raise ValueError("cannot take the maximum of an empty sequence")
    return max(enumerate(values), key=lambda pair: (pair[1], pair[0]))[0]


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of two sorted sequences taken together; 0.0 when both are empty."""
    merged = list(heapq.merge(nums1, nums2))
    if not merged:
        return 0.0
    middle = len(merged) // 2
    if len(merged) % 2:
        return float(merged[middle])
    return (merged[middle - 1] + merged[middle]) / 2.0


def min_sub_array_len(s: int, nums: Sequence[int]) -> int:
    """Return the length of the shortest run of ``nums`` summing to at least ``s``, or 0."""
    best = 0
    start = 0
    total = 0
    for index, value in enumerate(nums):
        total += value
        if total < s:
            continue
        while start < index and total - nums[start] >= s:
            total -= nums[start]
            start += 1
        length = index - start + 1
        best = length if best == 0 else min(best, length)
    return best


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values in place and return the new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Sort ``nums`` in place, drop every ``val`` and return the new length."""
    nums.sort()
    nums[:] = [value for value in nums if value != val]
    return len(nums)