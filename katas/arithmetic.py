"""Small integer puzzles."""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import Iterable

_PARITY_NAMES = ("Even", "Odd")


def count_bits(n: int) -> int:
    """Return the number of bits set in the non-negative integer ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return bin(n).count("1")


def even_or_odd(number: int) -> str:
    """Return ``"Even"`` or ``"Odd"``."""
    return _PARITY_NAMES[number % 2]


def find_odd(seq: Iterable[int]) -> int:
    """Return the value that occurs an odd number of times in ``seq``."""
    return reduce(xor, seq, 0)


def maximum_subarray_sum(numbers: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run, or 0 if every run is negative."""
    current = best = 0
    for number in numbers:
        current = max(0, current + number)
        best = max(best, current)
    return best


def multiple_3_and_5(number: int) -> int:
    """Return the sum of all multiples of 3 or 5 below ``number``."""
    return sum(i for i in range(number) if i % 3 == 0 or i % 5 == 0)


def multiply(a: int, b: int) -> int:
    """Return the product of ``a`` and ``b``."""
    return a * b


def make_negative(x: int) -> int:
    """Return ``x`` made negative, leaving zero and negatives alone."""
    return -x if x > 0 else x


def digital_root(n: int) -> int:
    """Sum the digits of ``n`` repeatedly until a single digit remains."""
    while n >= 10:
        n = sum(int(digit) for digit in str(n))
    return n


def positive_sum(numbers: Iterable[int]) -> int:
    """Return the sum of the positive values in ``numbers``."""
    return sum(n for n in numbers if n > 0)


def josephus_survivor(n: int, k: int) -> int:
    """Return the 1-based position of the survivor when every ``k``-th of ``n`` is removed."""
    survivor = 1
    for size in range(1, n + 1):
        survivor = (survivor + k - 1) % size + 1
    return survivor