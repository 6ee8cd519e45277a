# -*- coding: utf-8 -*-
"""
poison_grid パッケージの入口となるモジュールです。

    from poison_grid import solve

と呼び出されることを想定しています。

ここでは、入力（Problem）を受け取り、
1. 盤面の構築（毒マス / 食べられるマス）
2. 最終行から上に向かう後退 DP で勝ちテーブルを計算
3. 勝ちマスの一覧を構築
を順番に呼び出します。
"""

from __future__ import annotations

from .grid.board import build_board
from .grid.parser import parse_text
from .dp.evaluator import evaluate
from .logging_utils import get_logger
from .postprocess.report import count_winning, winning_cells
from .types import InvalidInputError, Problem, SolveResult

__all__ = [
    "InvalidInputError",
    "Problem",
    "SolveResult",
    "solve",
    "solve_text",
]

logger = get_logger()


def solve(problem: Problem) -> SolveResult:
    """
    毒マスゲームの勝ちマスを計算するメイン関数。
    """
    logger.info("=== solve() START ===")
    logger.info("Board shape: %s", problem.shape)

    # 1) 盤面構築
    board = build_board(problem)
    logger.debug("Poisoned cells: %d", sum(problem.eaten))

    # 2) 後退 DP
    dp = evaluate(board)

    # 3) 勝ちマスの列挙
    cells = winning_cells(dp)
    logger.info("Winning cells: %d", count_winning(dp))

    logger.info("=== solve() END ===")
    return SolveResult(problem=problem, board=board, win_table=dp, cells=cells)


def solve_text(text: str) -> SolveResult:
    """入力テキストをパースしてから :func:`solve` を呼びます。"""
    return solve(parse_text(text))
