"""Classic array exercises: scanning, two pointers and binary search."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, groupby
from typing import Iterable, MutableSequence, Sequence


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one later sell.

    Returns 0 when no profitable trade exists.
    """
    lowest: int | None = None
    best = 0
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        best = max(best, price - lowest)
    return best


def _digit_count(n: int) -> int:
    if n <= 0:
        raise ValueError(f"digit count is defined for positive integers only, got {n}")
    return len(str(n))


def find_numbers(nums: Iterable[int]) -> int:
    """Count the positive integers in *nums* that have an even number of digits."""
    return sum(1 for n in nums if _digit_count(n) % 2 == 0)


def number_of_steps(num: int) -> int:
    """Count the steps to reach zero by halving even numbers and decrementing odd ones."""
    steps = 0
    while num > 0:
        num = num - 1 if num % 2 == 1 else num // 2
        steps += 1
    return steps


def running_sum(nums: Iterable[int]) -> list[int]:
    """Return the prefix sums of *nums*."""
    return list(accumulate(nums))


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than half the time, or 0 if there is none."""
    half = len(nums) // 2
    for value, count in Counter(nums).items():
        if count > half:
            return value
    return 0


def build_array(nums: Sequence[int]) -> list[int]:
    """Return ``ans`` where ``ans[i] == nums[nums[i]]``."""
    return [nums[index] for index in nums]


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value appears more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Collapse runs of equal values in place.

    The first *k* slots of *nums* receive the collapsed values; *k* is returned.
    The remaining slots are left as they were.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def missing_number(nums: Sequence[int]) -> int:
    """Return the smallest value in ``0..len(nums)`` absent from *nums*."""
    limit = len(nums)
    seen: set[int] = set()
    for num in nums:
        if not 0 <= num <= limit:
            raise ValueError(f"value {num} is outside the range 0..{limit}")
        seen.add(num)
    return next(i for i in range(limit + 1) if i not in seen)


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every value other than *val* to the front, in order, and return their count."""
    kept = [num for num in nums if num != val]
    nums[: len(kept)] = kept
    return len(kept)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move all zeroes to the end in place, keeping the order of the other values."""
    kept = [num for num in nums if num != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of *target* in the sorted *nums*, or -1 if it is absent."""
    left, right = 0, len(nums) - 1
    while left <= right:
        middle = left + (right - left) // 2
        if nums[middle] > target:
            right = middle - 1
        elif nums[middle] < target:
            left = middle + 1
        else:
            return middle
    return -1


def pivot_index(nums: Sequence[int]) -> int:
    """Return the leftmost index whose left and right sums are equal, or -1."""
    total = sum(nums)
    left = 0
    for index, num in enumerate(nums):
        if left == total - left - num:
            return index
        left += num
    return -1


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching closed intervals into a sorted list."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged