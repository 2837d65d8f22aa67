"""Contest problems solved by counting, prefix sums and binary search."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence
from itertools import accumulate
from math import isqrt

GOOD_ARRAY_LIMIT = 200_000
CONTEST_MINUTES = 240
MINUTES_PER_PROBLEM = 5


def is_square_sum(numbers: Iterable[int]) -> bool:
    """Return whether the numbers add up to a perfect square."""
    total = sum(numbers)
    return total >= 0 and isqrt(total) ** 2 == total


def longest_good_array(low: int, high: int) -> int:
    """Return the longest strictly increasing array within ``low..high``
    whose consecutive differences also strictly increase.

    An array of length ``m`` needs a span of at least ``m * (m - 1) / 2``;
    lengths are searched up to ``GOOD_ARRAY_LIMIT``.
    """
    span = high - low
    lengths = range(1, GOOD_ARRAY_LIMIT + 1)
    return bisect_right(lengths, span, key=lambda m: m * (m - 1) // 2)


def completion_day(n: int, a: int, b: int, c: int) -> int:
    """Return the first day on which a walker covering ``a``, ``b``, ``c``
    kilometres in a repeating three-day cycle has walked at least ``n``."""
    cycle = a + b + c

    def walked(day: int) -> int:
        full, rest = divmod(day, 3)
        total = full * cycle
        if rest >= 1:
            total += a
        if rest >= 2:
            total += b
        return total

    days = range(1, n + 1)
    index = bisect_left(days, n, key=walked)
    return days[index] if index < len(days) else n


def initials(first: str, second: str, third: str) -> str:
    """Return the first letters of the three words."""
    words = (first, second, third)
    if not all(words):
        raise ValueError("every word must be non-empty")
    return "".join(word[0] for word in words)


def max_problems(n: int, k: int) -> int:
    """Return how many of ``n`` problems fit before a party ``k`` minutes
    after the contest ends, when problem ``i`` takes ``5 * i`` minutes."""
    budget = CONTEST_MINUTES - k
    counts = range(n + 1)
    fitting = bisect_right(
        counts, budget, key=lambda m: MINUTES_PER_PROBLEM * m * (m + 1) // 2
    )
    return max(fitting - 1, 0)


def can_balance(a: int, b: int, c: int) -> bool:
    """Return whether the three piles can be made equal by moving from the
    outer piles towards the middle."""
    return (a + b + c) % 3 == 0 and a + c >= 2 * b


def suffix_best_sums(values: Sequence[int]) -> list[int]:
    """For each ``k`` from 1 to ``len(values)``, return the best sum of the
    last ``k`` values when one of them may be swapped for any earlier value."""
    size = len(values)
    if not size:
        return []
    prefix_max = list(accumulate(values, max))
    suffix_sum = list(accumulate(reversed(values), initial=0))[::-1]
    return [
        max(suffix_sum[start], suffix_sum[start + 1] + prefix_max[start])
        for start in reversed(range(size))
    ]