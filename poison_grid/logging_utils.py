# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

ポイント:
- ログは標準エラー出力に出します。
  標準出力は勝ちマスのレポート専用なので、ログが混ざらないようにしています。
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOGGER_NAME


def get_logger() -> logging.Logger:
    """
    poison_grid 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準エラー出力に DEFAULT_LOG_LEVEL 以上のログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(DEFAULT_LOG_LEVEL)

    return logger


def set_log_level(level: Optional[int]) -> logging.Logger:
    """共通 logger のレベルを変更します（None なら既定値に戻す）。"""
    logger = get_logger()
    logger.setLevel(DEFAULT_LOG_LEVEL if level is None else level)
    return logger
