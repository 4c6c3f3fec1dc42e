"""Numbers whose squared divisors sum to a perfect square."""

from __future__ import annotations

import math
from typing import Iterator


def _divisors(n: int) -> Iterator[int]:
    i = 1
    while i * i <= n:
        if n % i == 0:
            yield i
            if i != n // i:
                yield n // i
        i += 1


def _is_square(n: int) -> bool:
    return n >= 0 and math.isqrt(n) ** 2 == n


def list_squared(m: int, n: int) -> list[list[int]]:
    """Return ``[i, s]`` for each ``i`` in ``[m, n]`` whose squared divisors sum to a square ``s``."""
    result = []
    for i in range(m, n + 1):
        total = sum(d * d for d in _divisors(i))
        if _is_square(total):
            result.append([i, total])
    return result