import random

import pytest

from algonotes.heap_sort import heap_sort, make_max_heap, max_heapify


def _is_max_heap(nums):
    return all(
        nums[(pos - 1) // 2] >= nums[pos] for pos in range(1, len(nums))
    )


@pytest.mark.parametrize("seed", range(5))
def test_heap_sort_matches_sorted(seed):
    rng = random.Random(seed)
    nums = [rng.randrange(10) for _ in range(rng.randrange(1, 30))]
    expected = sorted(nums)
    heap_sort(nums)
    assert nums == expected


def test_heap_sort_empty_and_single():
    empty = []
    heap_sort(empty)
    assert empty == []
    one = [4]
    heap_sort(one)
    assert one == [4]


@pytest.mark.parametrize("seed", range(5))
def test_make_max_heap_property(seed):
    rng = random.Random(seed)
    nums = [rng.randrange(100) for _ in range(20)]
    original = sorted(nums)
    make_max_heap(nums)
    assert _is_max_heap(nums)
    assert sorted(nums) == original
    assert nums[0] == original[-1]


def test_max_heapify_sifts_root_down():
    nums = [1, 5, 3]
    max_heapify(nums, 1, 3)
    assert nums == [5, 1, 3]


def test_max_heapify_respects_heap_size():
    nums = [1, 5, 3]
    max_heapify(nums, 1, 1)
    assert nums == [1, 5, 3]