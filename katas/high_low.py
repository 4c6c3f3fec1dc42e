"""Report the highest and lowest of space separated integers."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _to_int(word: str) -> int:
    if not _INTEGER.fullmatch(word):
        raise ValueError(f"not an integer: {word!r}")
    return int(word)


def high_and_low(text: str) -> str:
    """Return ``"<highest> <lowest>"`` for the numbers in ``text``."""
    values = [_to_int(word) for word in text.split(" ")]
    return f"{max(values)} {min(values)}"