"""Score a throw of five dice in the game Greed."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

# die face -> (score for a triple, score for each single)
_SCORES = {
    1: (1000, 100),
    2: (200, 0),
    3: (300, 0),
    4: (400, 0),
    5: (500, 50),
    6: (600, 0),
}


def _score_for(face: int, count: int) -> int:
    triple, single = _SCORES.get(face, (0, 0))
    if count >= 3:
        return triple + (count - 3) * single
    return count * single


def score(dice: Sequence[int]) -> int:
    """Return the Greed score of five ``dice``."""
    if len(dice) != 5:
        raise ValueError("a throw has exactly five dice")
    return sum(_score_for(face, count) for face, count in Counter(dice).items())