"""Summarise a bookseller's stock by category letter."""

from __future__ import annotations

from collections import Counter
from typing import Sequence


def _parse_art(art: str) -> tuple[str, int]:
    code, _, quantity = art.partition(" ")
    if not code or not quantity.split():
        raise ValueError(f"malformed stock entry: {art!r}")
    count = int(quantity.split()[0])
    if count < 0:
        raise ValueError(f"negative quantity in stock entry: {art!r}")
    return code[0], count


def stock_list(list_art: Sequence[str], list_cat: Sequence[str]) -> str:
    """Return the total quantity for each category in ``list_cat``."""
    if not list_art:
        return ""

    stock: Counter[str] = Counter()
    for art in list_art:
        category, quantity = _parse_art(art)
        stock[category] += quantity

    return " - ".join(f"({cat[0]} : {stock[cat[0]]})" for cat in list_cat)