"""Decide the state of a tic-tac-toe board."""

from __future__ import annotations

from typing import Sequence

EMPTY = 0
DRAW = 0
NOT_FINISHED = -1


def _lines(board: Sequence[Sequence[int]]) -> list[tuple[int, ...]]:
    rows = [tuple(row) for row in board]
    columns = [tuple(column) for column in zip(*rows)]
    diagonals = [
        tuple(rows[i][i] for i in range(3)),
        tuple(rows[i][2 - i] for i in range(3)),
    ]
    return rows + columns + diagonals


def is_solved(board: Sequence[Sequence[int]]) -> int:
    """Return the winner (1 or 2), 0 for a draw, or -1 if the game goes on."""
    if len(board) != 3 or any(len(row) != 3 for row in board):
        raise ValueError("board must be 3x3")

    for line in _lines(board):
        if len(set(line)) == 1 and line[0] != EMPTY:
            return line[0]

    if all(cell != EMPTY for row in board for cell in row):
        return DRAW
    return NOT_FINISHED