# -*- coding: utf-8 -*-
"""
poison_grid 全体で共通して使う設定値をまとめたモジュールです。

ここを編集することで
- 盤面のセル値（毒 / 食べられる）
- ログの出力レベル・書式
- CLI の出力形式
などを変更できます。
"""

from __future__ import annotations

import logging

# ==== 盤面関連 =============================================================

# 毒マス（食べられたマス）のセル値
POISONED: int = 0

# 食べられるマスのセル値
EDIBLE: int = 1

# 盤面配列の dtype
BOARD_DTYPE: str = "int8"

# ==== ログ関連 =============================================================

# poison_grid パッケージ共通で使うロガー名
LOGGER_NAME: str = "poison_grid"

# 通常時のログレベル
DEFAULT_LOG_LEVEL: int = logging.INFO

# --verbose 指定時のログレベル
VERBOSE_LOG_LEVEL: int = logging.DEBUG

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

# ==== 出力関連 =============================================================

# 出力形式: "text"（標準の数値出力）, "csv", "json"
OUTPUT_FORMATS: tuple = ("text", "csv", "json")
DEFAULT_OUTPUT_FORMAT: str = "text"

# 入力が不正だった場合の終了コード
EXIT_INVALID_INPUT: int = 2
