"""A Caesar cipher variant that carries its shift in a two-letter prefix."""

from __future__ import annotations

import math
from typing import Iterable

_ALPHABET_SIZE = 26
_CHUNK_COUNT = 5


def _shift_char(char: str, shift: int) -> str:
    if "a" <= char <= "z":
        base = ord("a")
    elif "A" <= char <= "Z":
        base = ord("A")
    else:
        return char
    return chr((ord(char) - base + shift) % _ALPHABET_SIZE + base)


def _shift_text(text: str, shift: int) -> str:
    return "".join(_shift_char(char, shift) for char in text)


def _split(text: str, size: int) -> list[str]:
    return [text[start:start + size] for start in range(0, len(text), size)]


def encode(text: str, shift: int) -> list[str]:
    """Encrypt ``text`` with ``shift`` and split the result into up to five chunks."""
    if not text:
        raise ValueError("cannot encode an empty text")
    first = text[0].lower()
    prefix = first + _shift_char(first, shift)
    ciphertext = prefix + _shift_text(text, shift)
    size = math.ceil(len(ciphertext) / _CHUNK_COUNT)
    return _split(ciphertext, size)


def decode(chunks: Iterable[str]) -> str:
    """Join ``chunks`` and decrypt them using the shift stored in the prefix."""
    ciphertext = "".join(chunks)
    if len(ciphertext) < 2:
        raise ValueError("ciphertext is too short to hold its prefix")
    shift = (ord(ciphertext[1]) - ord(ciphertext[0])) % _ALPHABET_SIZE
    return _shift_text(ciphertext[2:], -shift)