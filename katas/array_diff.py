"""Remove from one list every value found in another."""

from __future__ import annotations

from typing import Iterable


def array_diff(a: Iterable[int], b: Iterable[int]) -> list[int]:
    """Return the items of ``a`` that do not occur in ``b``, keeping order."""
    excluded = set(b)
    return [value for value in a if value not in excluded]