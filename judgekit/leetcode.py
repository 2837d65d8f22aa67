"""Array, search and bit manipulation problems."""

from __future__ import annotations

from bisect import bisect_left
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from operator import xor

UINT32_MASK = 0xFFFFFFFF
MAX_SORT_VALUE = 1000


def relative_sort_array(arr1: Sequence[int], arr2: Iterable[int]) -> list[int]:
    """Order ``arr1`` by the order of ``arr2``; values missing from ``arr2``
    follow in ascending order. Values must lie in 0..1000."""
    for value in arr1:
        if not 0 <= value <= MAX_SORT_VALUE:
            raise ValueError(f"{value} outside 0..{MAX_SORT_VALUE}")
    counts = Counter(arr1)
    result: list[int] = []
    for value in arr2:
        result.extend([value] * counts.pop(value, 0))
    for value in sorted(counts):
        result.extend([value] * counts[value])
    return result


def single_number(nums: Iterable[int]) -> int:
    """Return the value that appears an odd number of times when every
    other value appears twice."""
    return reduce(xor, nums, 0)


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element greater than its neighbours."""
    if not nums:
        raise ValueError("empty sequence has no peak")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if nums[mid] > nums[mid + 1]:
            hi = mid
        else:
            lo = mid + 1
    return lo


def reverse_bits(n: int) -> int:
    """Reverse the bits of an unsigned 32-bit integer."""
    if not 0 <= n <= UINT32_MASK:
        raise ValueError(f"{n} is not an unsigned 32-bit integer")
    return int(format(n, "032b")[::-1], 2)


def hamming_weight(n: int) -> int:
    """Count the set bits of ``n`` as a 32-bit integer."""
    return bin(n & UINT32_MASK).count("1")


def range_bitwise_and(left: int, right: int) -> int:
    """Return the bitwise AND of every integer in ``left..right``."""
    shift = 0
    while left < right:
        left >>= 1
        right >>= 1
        shift += 1
    return left << shift


def remove_element(nums: list[int], val: int) -> int:
    """Move the elements not equal to ``val`` to the front of ``nums``,
    in order, and return how many there are."""
    kept = [value for value in nums if value != val]
    nums[: len(kept)] = kept
    return len(kept)


def linear_search(nums: Sequence[int], target: int) -> int:
    """Return the first index of ``target``, or -1 if it is absent."""
    for index, value in enumerate(nums):
        if value == target:
            return index
    return -1


def count_bits(n: int) -> list[int]:
    """Return the number of set bits of every integer in ``0..n``."""
    counts = [0] * (n + 1)
    for value in range(1, n + 1):
        counts[value] = counts[value >> 1] + (value & 1)
    return counts


def find_median_sorted_arrays(nums1: Iterable[int], nums2: Iterable[int]) -> float:
    """Return the median of the two arrays taken together."""
    merged = sorted([*nums1, *nums2])
    if not merged:
        raise ValueError("median of no values")
    mid = len(merged) // 2
    if len(merged) % 2:
        return float(merged[mid])
    return (merged[mid - 1] + merged[mid]) / 2


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in the sorted ``nums``, or -1."""
    index = bisect_left(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Return whether ``target`` is in a matrix whose rows, read one after
    another, are sorted."""
    if not matrix or not matrix[0]:
        return False
    width = len(matrix[0])

    def cell(position: int) -> int:
        row, col = divmod(position, width)
        return matrix[row][col]

    cells = range(len(matrix) * width)
    index = bisect_left(cells, target, key=cell)
    return index < len(cells) and cell(index) == target


def sort_colors(nums: list[int]) -> None:
    """Sort ``nums`` in place."""
    nums.sort()