# -*- coding: utf-8 -*-
"""
勝ちテーブルをもとに表示用の情報を構築するモジュールです。

座標はすべて 1 始まりで、行優先（行の昇順、その中で列の昇順）に並べます。
"""

from __future__ import annotations

import json
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from ..types import CellCoord, SolveResult


def winning_cells(dp: np.ndarray) -> List[CellCoord]:
    """勝ちマスの座標 (row, col) を 1 始まり・行優先順で返します。"""
    rows, cols = dp.shape
    cells: List[CellCoord] = []

    for i in range(rows):
        for j in range(cols):
            if dp[i, j]:
                cells.append((i + 1, j + 1))

    return cells


def count_winning(dp: np.ndarray) -> int:
    return int(np.count_nonzero(dp))


def winning_cells_frame(dp: np.ndarray) -> pd.DataFrame:
    """
    勝ちマスの一覧を DataFrame にします。

    Returns
    -------
    pandas.DataFrame
        'row', 'col' 列（1 始まり）を持つ DataFrame。
    """
    return pd.DataFrame(winning_cells(dp), columns=["row", "col"], dtype=int)


def build_result(result: SolveResult) -> Dict[str, Any]:
    """JSON にそのまま変換できる dict を作ります。"""
    return {
        "count": result.count,
        "cells": [[r, c] for r, c in result.cells],  # ★ tuple ではなく list
        "shape": list(result.problem.shape),
    }


def format_report(result: SolveResult) -> str:
    """
    標準出力用のテキストを作ります。

    1 行目が勝ちマスの個数、続いて勝ちマスごとに "row col" を 1 行ずつ出力します。
    """
    lines = [str(result.count)]
    lines.extend(f"{r} {c}" for r, c in result.cells)
    return "\n".join(lines) + "\n"


def format_csv(result: SolveResult) -> str:
    return winning_cells_frame(result.win_table).to_csv(index=False)


def format_json(result: SolveResult) -> str:
    return json.dumps(build_result(result), ensure_ascii=False) + "\n"


FORMATTERS = {
    "text": format_report,
    "csv": format_csv,
    "json": format_json,
}


def render(result: SolveResult, fmt: str = "text") -> str:
    """出力形式名に応じてレポートを文字列化します。"""
    try:
        formatter = FORMATTERS[fmt]
    except KeyError:
        raise ValueError(f"Unknown output format: {fmt!r}") from None
    return formatter(result)
