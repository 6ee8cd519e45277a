# -*- coding: utf-8 -*-
"""
Problem から盤面（0/1 の 2次元 numpy 配列）を作るモジュールです。

- 0 : 毒マス（POISONED）
- 1 : 食べられるマス（EDIBLE）
"""

from __future__ import annotations

import numpy as np

from ..config import BOARD_DTYPE, EDIBLE, POISONED
from ..types import InvalidInputError, Problem


def validate_problem(problem: Problem) -> None:
    """Problem の不変条件（サイズが非負、0 <= eaten[i] <= cols）を確認します。"""
    if problem.rows < 0 or problem.cols < 0:
        raise InvalidInputError(
            f"Board dimensions must be non-negative, got {problem.rows}x{problem.cols}."
        )
    if len(problem.eaten) != problem.rows:
        raise InvalidInputError(
            f"Expected {problem.rows} eaten values, got {len(problem.eaten)}."
        )
    for i, value in enumerate(problem.eaten):
        if not 0 <= value <= problem.cols:
            raise InvalidInputError(f"eaten[{i}]={value} is out of range 0..{problem.cols}.")


def build_board(problem: Problem) -> np.ndarray:
    """
    各行 i の列 0..eaten[i]-1 を毒マスにした盤面を返します。

    Parameters
    ----------
    problem : Problem
        入力。

    Returns
    -------
    numpy.ndarray
        shape = (rows, cols) の配列。
    """
    validate_problem(problem)

    board = np.full(problem.shape, EDIBLE, dtype=BOARD_DTYPE)
    for i, eaten in enumerate(problem.eaten):
        board[i, :eaten] = POISONED

    return board


def is_edible(board: np.ndarray, i: int, j: int) -> bool:
    return bool(board[i, j] == EDIBLE)
