"""Small programming exercises: ciphers, tiny interpreters, number puzzles and string tricks."""

__version__ = "0.1.0"