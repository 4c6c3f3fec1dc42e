"""Cancel out opposite moves in a list of compass directions."""

from __future__ import annotations

from typing import Iterable

_AXES = (("NORTH", "SOUTH"), ("EAST", "WEST"))

_OPPOSITES = {
    direction: opposite
    for one, other in _AXES
    for direction, opposite in ((one, other), (other, one))
}


def dir_reduc(directions: Iterable[str]) -> list[str]:
    """Return ``directions`` with every adjacent pair of opposites removed."""
    reduced: list[str] = []
    for direction in directions:
        if reduced and _OPPOSITES.get(reduced[-1], "") == direction:
            reduced.pop()
        else:
            reduced.append(direction)
    return reduced