"""Length of granny's tour through her friends' towns."""

from __future__ import annotations

import math
from typing import Iterable, Mapping


def tour(
    friends: Iterable[str],
    friend_towns: Mapping[str, str],
    distances: Mapping[str, float],
) -> int:
    """Return the floored length of the round trip visiting the known towns in order."""
    towns = [friend_towns[friend] for friend in friends if friend in friend_towns]
    legs = [distances[town] for town in towns if town in distances]
    if not legs:
        raise ValueError("no friend lives in a town with a known distance")

    between = sum(math.sqrt(c * c - a * a) for a, c in zip(legs, legs[1:]))
    return math.floor(legs[0] + between + legs[-1])