import pytest

from katas.tic_tac_toe import is_solved


@pytest.mark.parametrize(
    "board, expected",
    [
        ([[0, 0, 1], [0, 1, 2], [2, 1, 0]], -1),
        ([[1, 1, 1], [0, 2, 2], [0, 0, 0]], 1),
        ([[2, 1, 2], [2, 1, 1], [1, 1, 2]], 1),
        ([[2, 1, 2], [2, 1, 1], [1, 2, 1]], 0),
    ],
)
def test_source_cases(board, expected):
    assert is_solved(board) == expected


def test_diagonal_winner():
    assert is_solved([[2, 1, 0], [1, 2, 0], [0, 1, 2]]) == 2


def test_anti_diagonal_winner():
    assert is_solved([[0, 1, 2], [1, 2, 0], [2, 1, 0]]) == 2


def test_empty_board_not_finished():
    assert is_solved([[0, 0, 0], [0, 0, 0], [0, 0, 0]]) == -1


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        is_solved([[0, 0], [0, 0]])