# -*- coding: utf-8 -*-
"""
勝ちテーブル dp を後退 DP で計算するモジュールです。

dp[i, j] が True のとき、マス (i, j) は「勝ちマス」に分類されます。

漸化式
------
- 最終行: dp[m-1, j] = (m-1, j) が食べられるマスかどうか
- それより上の行 (i = m-2 .. 0):
    - 毒マスなら False
    - 食べられるマスなら、次のどちらかが成り立つとき True
        - 右 (i, j+1) が盤面内・食べられる・dp[i, j+1] が True
        - 下 (i+1, j) が盤面内・食べられる・dp[i+1, j] が True

注意: 手番の交代による否定は入れていません。
後続マスが勝ちマスなら自分も勝ちマス、という形のまま計算します。
"""

from __future__ import annotations

import numpy as np

from ..logging_utils import get_logger
from ..grid.board import is_edible

logger = get_logger()


def evaluate_last_row(board: np.ndarray, dp: np.ndarray) -> None:
    """最終行の dp を、そのマスが食べられるかどうかだけで決めます。"""
    rows, cols = board.shape
    last = rows - 1
    for j in range(cols):
        dp[last, j] = is_edible(board, last, j)


def evaluate_row(board: np.ndarray, dp: np.ndarray, i: int) -> None:
    """
    行 i の dp を計算します。行 i+1 はすでに計算済みである必要があります。

    右隣の値を参照するので、列は右端から左へ向かって埋めます。
    """
    rows, cols = board.shape
    for j in range(cols - 1, -1, -1):
        if not is_edible(board, i, j):
            dp[i, j] = False
            continue

        # 右へ進んで勝ちマスに入れるか
        can_right = j + 1 < cols and is_edible(board, i, j + 1) and bool(dp[i, j + 1])
        # 下へ進んで勝ちマスに入れるか
        can_down = i + 1 < rows and is_edible(board, i + 1, j) and bool(dp[i + 1, j])

        dp[i, j] = can_right or can_down


def evaluate(board: np.ndarray) -> np.ndarray:
    """
    盤面から勝ちテーブルを計算して返します。

    Parameters
    ----------
    board : numpy.ndarray
        :func:`poison_grid.grid.board.build_board` で作った盤面。

    Returns
    -------
    numpy.ndarray
        shape = board.shape の bool 配列。書き込み不可にしてあります。
    """
    rows, cols = board.shape
    dp = np.zeros((rows, cols), dtype=bool)

    if rows == 0 or cols == 0:
        dp.setflags(write=False)
        return dp

    evaluate_last_row(board, dp)
    for i in range(rows - 2, -1, -1):
        evaluate_row(board, dp, i)

    logger.debug("Win table computed: shape=%s, winning=%d", dp.shape, int(dp.sum()))

    # 計算後は変更しない
    dp.setflags(write=False)
    return dp
