"""Pick the best total distance for a trip through a fixed number of towns."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence


def choose_best_sum(t: int, k: int, ls: Sequence[int]) -> int:
    """Return the largest sum of ``k`` distances from ``ls`` not above ``t``, or -1."""
    if k < 0:
        return -1
    sums = (sum(combo) for combo in combinations(ls, k))
    return max((total for total in sums if total <= t), default=-1)