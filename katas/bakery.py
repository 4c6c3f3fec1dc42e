"""How many cakes can be baked from the available ingredients."""

from __future__ import annotations

import sys
from typing import Mapping


def cakes(recipe: Mapping[str, int], available: Mapping[str, int]) -> int:
    """Return the number of whole cakes ``available`` supplies for ``recipe``."""
    possible = []
    for ingredient, amount in recipe.items():
        stock = available.get(ingredient, 0)
        if stock == 0:
            return 0
        possible.append(stock // amount)
    return min(possible, default=sys.maxsize)