"""Heap sort on a list, with its max-heap helpers using 1-based positions."""

from __future__ import annotations


def max_heapify(nums: list[int], index: int, heap_size: int) -> None:
    """Sift the value at 1-based ``index`` down within the first ``heap_size`` items."""
    while True:
        left, right = 2 * index, 2 * index + 1
        largest = index
        if left <= heap_size and nums[left - 1] > nums[index - 1]:
            largest = left
        if right <= heap_size and nums[right - 1] > nums[largest - 1]:
            largest = right
        if largest == index:
            return
        nums[largest - 1], nums[index - 1] = nums[index - 1], nums[largest - 1]
        index = largest


def make_max_heap(nums: list[int]) -> None:
    """Rearrange ``nums`` in place into a max-heap."""
    for index in range(len(nums) // 2, 0, -1):
        max_heapify(nums, index, len(nums))


def heap_sort(nums: list[int]) -> None:
    """Sort ``nums`` in place in ascending order."""
    make_max_heap(nums)
    for size in range(len(nums), 1, -1):
        nums[0], nums[size - 1] = nums[size - 1], nums[0]
        max_heapify(nums, 1, size - 1)