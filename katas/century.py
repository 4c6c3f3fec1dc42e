"""Name the century a year belongs to."""

from __future__ import annotations

import re

_YEAR = re.compile(r"[+-]?[0-9]+")


def _parse_year(text: str) -> int:
    if not _YEAR.fullmatch(text):
        raise ValueError(f"invalid year: {text!r}")
    return int(text)


def _truncated_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _ordinal(number: int) -> str:
    last = number - 10 * _truncated_div(number, 10)
    if last == 1 and number != 11:
        return f"{number}st"
    if last == 2 and number != 12:
        return f"{number}nd"
    if last == 3 and number != 13:
        return f"{number}rd"
    return f"{number}th"


def what_century(year: str) -> str:
    """Return the century of ``year`` as an ordinal such as ``"21st"``."""
    value = _parse_year(year)
    return _ordinal(_truncated_div(value - 1, 100) + 1)