"""Classic exercises on lists of integers."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import groupby
from operator import xor


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two values adding up to ``target``, or []."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        other = seen.get(target - value)
        if other is not None:
            return [other, index]
        seen[value] = index
    return []


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the union of two sorted lists."""
    merged = list(heapq.merge(nums1, nums2))
    total = len(merged)
    if total == 0:
        raise ValueError("median of two empty lists")
    if total % 2 == 0:
        return (merged[(total - 1) // 2] + merged[total // 2]) / 2.0
    return float(merged[total // 2])


def remove_duplicates(nums: list[int]) -> int:
    """Collapse runs of equal values in place and return the new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_element(nums: list[int], val: int) -> int:
    """Remove every occurrence of ``val`` in place and return the new length."""
    nums[:] = [value for value in nums if value != val]
    return len(nums)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums`` or where it would go."""
    return bisect_left(nums, target)


def plus_one(digits: list[int]) -> list[int]:
    """Add one to a big-endian digit list in place and return it."""
    carry = 1
    for index in reversed(range(len(digits))):
        if not carry:
            break
        carry, digits[index] = divmod(digits[index] + carry, 10)
    if carry:
        digits.insert(0, carry)
    return digits


def merge(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Copy the first ``n`` of ``nums2`` into ``nums1`` after its first ``m`` and sort."""
    if len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 has no room for the merged values")
    nums1[m:m + n] = nums2[:n]
    nums1.sort()


def single_number(nums: Sequence[int]) -> int:
    """Return the one value that does not appear twice."""
    return reduce(xor, nums, 0)


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value appears more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def find_disappeared_numbers(nums: Sequence[int]) -> list[int]:
    """Return the values in 1..len(nums) that do not appear in ``nums``."""
    present = set(nums)
    return [value for value in range(1, len(nums) + 1) if value not in present]


def unique_occurrences(arr: Sequence[int]) -> bool:
    """Tell whether every distinct value occurs a distinct number of times."""
    counts = Counter(arr).values()
    return len(set(counts)) == len(counts)