import numpy as np
import pytest

from poison_grid.config import EDIBLE, POISONED
from poison_grid.grid.board import build_board, is_edible
from poison_grid.types import InvalidInputError, Problem


def test_board_marks_prefix_of_each_row_poisoned():
    board = build_board(Problem(rows=3, cols=4, eaten=[0, 2, 4]))
    expected = np.array(
        [
            [1, 1, 1, 1],
            [0, 0, 1, 1],
            [0, 0, 0, 0],
        ]
    )
    assert board.shape == (3, 4)
    assert np.array_equal(board, expected)


def test_is_edible_reads_cell_values():
    board = build_board(Problem(rows=1, cols=3, eaten=[1]))
    assert board[0, 0] == POISONED
    assert board[0, 1] == EDIBLE
    assert not is_edible(board, 0, 0)
    assert is_edible(board, 0, 2)


def test_empty_board():
    board = build_board(Problem(rows=0, cols=3, eaten=[]))
    assert board.shape == (0, 3)


@pytest.mark.parametrize(
    "problem",
    [
        Problem(rows=2, cols=2, eaten=[0]),
        Problem(rows=1, cols=2, eaten=[3]),
        Problem(rows=1, cols=2, eaten=[-1]),
        Problem(rows=-1, cols=2, eaten=[]),
    ],
)
def test_build_board_rejects_broken_problems(problem):
    with pytest.raises(InvalidInputError):
        build_board(problem)
