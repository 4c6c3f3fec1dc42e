"""Compress a sequence of notes into runs, repeats and arithmetic intervals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Union


@dataclass(frozen=True)
class _Simple:
    value: int

    def __str__(self) -> str:
        return f"{self.value}"


@dataclass(frozen=True)
class _SameValue:
    value: int
    count: int

    def accepts(self, value: int) -> bool:
        return value == self.value

    def extended(self, value: int) -> "_SameValue":
        return _SameValue(self.value, self.count + 1)

    def __str__(self) -> str:
        return f"{self.value}*{self.count}"


@dataclass(frozen=True)
class _Interval:
    start: int
    end: int
    step: int

    def accepts(self, value: int) -> bool:
        return self.end + self.step == value

    def extended(self, value: int) -> "_Interval":
        return _Interval(self.start, value, self.step)

    def __str__(self) -> str:
        if abs(self.step) == 1:
            return f"{self.start}-{self.end}"
        return f"{self.start}-{self.end}/{abs(self.step)}"


_Item = Union[_Simple, _SameValue, _Interval]
_EXTENDABLE = (_SameValue, _Interval)


def _is_interval(values: list[int]) -> bool:
    steps = {b - a for a, b in zip(values, values[1:])}
    return len(steps) == 1 and next(iter(steps)) != 0


def _take_initial(rest: deque[int]) -> _Item:
    """Remove the start of a new item from ``rest`` and return it."""
    first_three = list(islice(rest, 3))
    if len(first_three) == 3 and _is_interval(first_three):
        for _ in range(3):
            rest.popleft()
        start, middle, end = first_three
        return _Interval(start, end, middle - start)

    first_two = first_three[:2]
    if len(first_two) == 2 and first_two[0] == first_two[1]:
        rest.popleft()
        rest.popleft()
        return _SameValue(first_two[0], 2)

    return _Simple(rest.popleft())


def compress(raw: Iterable[int]) -> str:
    """Encode the notes in ``raw`` as a comma separated compressed string."""
    rest = deque(raw)
    if not rest:
        raise ValueError("cannot compress an empty sequence")

    items: list[_Item] = []
    while rest:
        last = items[-1] if items else None
        if isinstance(last, _EXTENDABLE) and last.accepts(rest[0]):
            items[-1] = last.extended(rest.popleft())
        else:
            items.append(_take_initial(rest))

    return ",".join(str(item) for item in items)