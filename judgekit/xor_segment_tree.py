"""Segment tree with range sums and lazy range XOR updates."""

from __future__ import annotations

from collections.abc import Iterable

BITS = 20


class XorSegmentTree:
    """Sums over ranges of non-negative integers below 2**20, with
    XOR-assignment over ranges. Positions are 1-based and inclusive."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        if not items:
            raise ValueError("the tree needs at least one value")
        for value in items:
            self._check_value(value)
        self._size = len(items)
        self._counts = [[0] * BITS for _ in range(4 * self._size)]
        self._lazy = [0] * (4 * self._size)
        self._build(1, 0, self._size - 1, items)

    def __len__(self) -> int:
        return self._size

    def query(self, left: int, right: int) -> int:
        """Return the sum of the values at positions ``left..right``."""
        self._check_range(left, right)
        return self._query(1, 0, self._size - 1, left - 1, right - 1)

    def update(self, left: int, right: int, value: int) -> None:
        """XOR every value at positions ``left..right`` with ``value``."""
        self._check_range(left, right)
        self._check_value(value)
        self._update(1, 0, self._size - 1, left - 1, right - 1, value)

    @staticmethod
    def _check_value(value: int) -> None:
        if not 0 <= value < 1 << BITS:
            raise ValueError(f"{value} does not fit in {BITS} bits")

    def _check_range(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self._size:
            raise IndexError(f"range {left}..{right} outside 1..{self._size}")

    def _pull(self, node: int) -> None:
        self._counts[node] = [
            a + b for a, b in zip(self._counts[2 * node], self._counts[2 * node + 1])
        ]

    def _build(self, node: int, lo: int, hi: int, items: list[int]) -> None:
        if lo == hi:
            self._counts[node] = [(items[lo] >> bit) & 1 for bit in range(BITS)]
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, items)
        self._build(2 * node + 1, mid + 1, hi, items)
        self._pull(node)

    def _apply(self, node: int, lo: int, hi: int, value: int) -> None:
        length = hi - lo + 1
        self._counts[node] = [
            length - count if (value >> bit) & 1 else count
            for bit, count in enumerate(self._counts[node])
        ]
        self._lazy[node] ^= value

    def _push(self, node: int, lo: int, hi: int) -> None:
        pending = self._lazy[node]
        if not pending:
            return
        mid = (lo + hi) // 2
        self._apply(2 * node, lo, mid, pending)
        self._apply(2 * node + 1, mid + 1, hi, pending)
        self._lazy[node] = 0

    def _update(self, node: int, lo: int, hi: int, ql: int, qr: int, value: int) -> None:
        if qr < lo or hi < ql:
            return
        if ql <= lo and hi <= qr:
            self._apply(node, lo, hi, value)
            return
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, ql, qr, value)
        self._update(2 * node + 1, mid + 1, hi, ql, qr, value)
        self._pull(node)

    def _query(self, node: int, lo: int, hi: int, ql: int, qr: int) -> int:
        if qr < lo or hi < ql:
            return 0
        if ql <= lo and hi <= qr:
            return sum(count << bit for bit, count in enumerate(self._counts[node]))
        self._push(node, lo, hi)
        mid = (lo + hi) // 2
        return self._query(2 * node, lo, mid, ql, qr) + self._query(
            2 * node + 1, mid + 1, hi, ql, qr
        )