"""Small arithmetic and number-format problems from an online judge."""

from __future__ import annotations

import string
from collections.abc import Iterable, Iterator

PI = 3.14159
UINT32_MASK = 0xFFFFFFFF

_DIGITS = string.digits + string.ascii_lowercase
_BASE_BY_KIND = {"bin": 2, "dec": 10}


def _check_uint32(value: int) -> int:
    if not 0 <= value <= UINT32_MASK:
        raise ValueError(f"{value} is not an unsigned 32-bit integer")
    return value


def _check_unsigned(value: int) -> int:
    if value < 0:
        raise ValueError(f"{value} is negative")
    return value


def sum_message(a: int, b: int) -> str:
    """Return the sum of ``a`` and ``b`` as ``"X = <sum>"``."""
    return f"X = {a + b}"


def circle_area(radius: float) -> float:
    """Return the area of a circle, using the judge's fixed value of pi."""
    return PI * (radius * radius)


def xor_pairs(pairs: Iterable[tuple[int, int]]) -> Iterator[int]:
    """Yield the bitwise XOR of each pair of unsigned 32-bit integers."""
    for a, b in pairs:
        yield _check_uint32(a) ^ _check_uint32(b)


def josephus(n: int, k: int) -> int:
    """Return the 1-based position of the survivor among ``n`` people
    when every ``k``-th person is removed."""
    if n < 1:
        raise ValueError("there must be at least one person")
    position = 0
    for size in range(2, n + 1):
        position = (position + k) % size
    return position + 1


def parse_number(text: str, base: int) -> int:
    """Parse ``text`` in ``base`` as an unsigned 32-bit integer.

    Letters may be upper or lower case; the result wraps modulo 2**32.
    """
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"unsupported base {base}")
    if not text:
        raise ValueError("empty number")
    value = 0
    for char in text.lower():
        digit = _DIGITS.find(char)
        if digit < 0 or digit >= base:
            raise ValueError(f"invalid digit {char!r} for base {base}")
        value = (value * base + digit) & UINT32_MASK
    return value


def to_hex(value: int) -> str:
    """Return ``value`` in lower-case hexadecimal without a prefix."""
    return format(_check_unsigned(value), "x")


def to_bin(value: int) -> str:
    """Return ``value`` in binary without a prefix."""
    return format(_check_unsigned(value), "b")


def convert_base(text: str, kind: str) -> list[str]:
    """Convert a number given as ``kind`` ("bin", "dec", anything else is
    hex) into the other two bases, as ``"<digits> <kind>"`` lines."""
    base = _BASE_BY_KIND.get(kind, 16)
    value = parse_number(text, base)
    lines = []
    if base != 10:
        lines.append(f"{value} dec")
    if base != 16:
        lines.append(f"{to_hex(value)} hex")
    if base != 2:
        lines.append(f"{to_bin(value)} bin")
    return lines


def sums_until_zero(pairs: Iterable[tuple[int, int]]) -> Iterator[int]:
    """Yield the sum of each pair, stopping at the first ``(0, 0)``."""
    for a, b in pairs:
        if a == 0 and b == 0:
            return
        yield a + b


def euclidean_division(a: int, b: int) -> tuple[int, int]:
    """Return ``(q, r)`` with ``a == b * q + r`` and ``0 <= r < abs(b)``."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    remainder = a % abs(b)
    quotient = (a - remainder) // b
    return quotient, remainder