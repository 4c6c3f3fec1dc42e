"""Find the smallest number reachable by moving a single digit."""

from __future__ import annotations

from itertools import product


def _move(digits: str, source: int, target: int) -> int:
    rest = digits[:source] + digits[source + 1:]
    return int(rest[:target] + digits[source] + rest[target:])


def smallest(n: int) -> list[int]:
    """Return ``[number, i, j]``: the smallest result of moving digit ``i`` to ``j``."""
    if n <= 0:
        raise ValueError("n must be a positive integer")
    digits = str(n)
    best: list[int] | None = None
    for i, j in product(range(len(digits)), repeat=2):
        number = _move(digits, i, j)
        if best is None or number < best[0]:
            best = [number, i, j]
    return best