"""Order numbers by the sum of their digits."""

from __future__ import annotations


def _weight(raw: str) -> int:
    return sum(ord(char) - ord("0") for char in raw)


def order_weight(text: str) -> str:
    """Sort the numbers in ``text`` by digit sum, ties broken as strings."""
    return " ".join(sorted(text.split(), key=lambda raw: (_weight(raw), raw)))