# -*- coding: utf-8 -*-
"""
poison_grid で使う主なデータ構造（型）と例外をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

# 盤面上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]


class InvalidInputError(ValueError):
    """入力（盤面サイズ・毒の列数）が不正な場合に送出される例外です。"""


@dataclass
class Problem:
    """
    1 問ぶんの入力を表すクラスです。

    Attributes
    ----------
    rows : int
        盤面の行数 m。
    cols : int
        盤面の列数 n。
    eaten : list of int
        各行の毒マス数。行 i では列 0..eaten[i]-1 が毒マスになります。
    """

    rows: int
    cols: int
    eaten: List[int] = field(default_factory=list)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)


@dataclass
class SolveResult:
    """
    solve() の結果をまとめたクラスです。

    Attributes
    ----------
    problem : Problem
        入力。
    board : numpy.ndarray
        shape = (rows, cols) の盤面。0 = 毒, 1 = 食べられる。
    win_table : numpy.ndarray
        shape = (rows, cols) の bool 配列（勝ちテーブル dp）。
    cells : list of (row, col)
        勝ちマスの座標（1 始まり、行優先順）。
    """

    problem: Problem
    board: np.ndarray
    win_table: np.ndarray
    cells: List[CellCoord]

    @property
    def count(self) -> int:
        """勝ちマスの個数を返します。"""
        return len(self.cells)
