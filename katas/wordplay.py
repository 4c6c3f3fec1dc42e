"""Small string puzzles."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

_ALL_VOWELS = frozenset("aeiouAEIOU")
_LOWER_VOWELS = frozenset("aeiou")


def create_phone_number(numbers: Sequence[int]) -> str:
    """Format ten digits as ``(ddd) ddd-dddd``."""
    if len(numbers) != 10:
        raise ValueError("exactly ten numbers are needed")
    if any(n < 0 for n in numbers):
        raise ValueError("numbers must not be negative")
    digits = [str(n) for n in numbers]
    return f"({''.join(digits[:3])}) {''.join(digits[3:6])}-{''.join(digits[6:])}"


def disemvowel(comment: str) -> str:
    """Return ``comment`` with all vowels removed."""
    return "".join(char for char in comment if char not in _ALL_VOWELS)


def reverse_string(word: str) -> str:
    """Return ``word`` reversed."""
    return word[::-1]


def spin_words(text: str) -> str:
    """Reverse every word of five or more letters in ``text``."""
    return " ".join(word[::-1] if len(word) >= 5 else word for word in text.split())


def valid_parentheses(parens: str) -> bool:
    """Return whether the parentheses in ``parens`` are balanced."""
    balance = 0
    for char in parens:
        if char == "(":
            balance += 1
        elif char == ")":
            balance -= 1
            if balance < 0:
                return False
    return balance == 0


def get_count(text: str) -> int:
    """Return the number of lowercase vowels in ``text``."""
    return sum(1 for char in text if char in _LOWER_VOWELS)


def first_non_repeating(text: str) -> str:
    """Return the first character occurring once, ignoring case, or ``""``."""
    counts = Counter(char.lower() for char in text)
    return next((char for char in text if counts[char.lower()] == 1), "")