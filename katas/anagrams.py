"""Select the anagrams of a word from a list."""

from __future__ import annotations

from typing import Iterable


def anagrams(word: str, words: Iterable[str]) -> list[str]:
    """Return the entries of ``words`` that are anagrams of ``word``, in order."""
    key = sorted(word)
    return [candidate for candidate in words if sorted(candidate) == key]