# -*- coding: utf-8 -*-
"""
入力テキストを Problem に変換するモジュールです。

入力形式（空白区切りの整数、改行位置は自由）::

    m n
    eaten_0 eaten_1 ... eaten_(m-1)

不正な入力は InvalidInputError で即座に失敗させます。
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, List, TextIO

from ..logging_utils import get_logger
from ..types import InvalidInputError, Problem
from .board import validate_problem

logger = get_logger()

# 符号付きの ASCII 10進整数のみ（"1_0" や全角・アラビア数字は不可）
INT_RE = re.compile(r"[+-]?[0-9]+")


def _next_int(it: Iterator[str], what: str) -> int:
    try:
        token = next(it)
    except StopIteration:
        raise InvalidInputError(f"Unexpected end of input while reading {what}.") from None

    if INT_RE.fullmatch(token) is None:
        raise InvalidInputError(f"Expected an integer for {what}, got {token!r}.")
    return int(token)


def parse_tokens(tokens: Iterable[str]) -> Problem:
    """
    トークン列から Problem を組み立てます。

    Parameters
    ----------
    tokens : iterable of str
        空白で区切られた入力トークン。

    Returns
    -------
    Problem

    Raises
    ------
    InvalidInputError
        整数でないトークン、負の盤面サイズ、毒マス数の不足・範囲外のとき。
    """
    it = iter(tokens)
    rows = _next_int(it, "row count m")
    cols = _next_int(it, "column count n")
    eaten: List[int] = [_next_int(it, f"eaten[{i}]") for i in range(max(rows, 0))]

    # サイズと毒マス数の範囲チェックは board 側と共通
    problem = Problem(rows=rows, cols=cols, eaten=eaten)
    validate_problem(problem)

    # 余ったトークンは読まずに捨てる
    leftover = sum(1 for _ in it)
    if leftover:
        logger.warning("Ignoring %d extra token(s) after the board description.", leftover)

    logger.debug("Parsed problem: %dx%d, eaten=%s", rows, cols, eaten)
    return problem


def parse_text(text: str) -> Problem:
    """文字列全体を空白で分割して :func:`parse_tokens` に渡します。"""
    return parse_tokens(text.split())


def read_problem(stream: TextIO) -> Problem:
    """ファイルや標準入力などのストリームから Problem を読み込みます。"""
    try:
        text = stream.read()
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Input is not valid UTF-8 text: {e}") from e
    return parse_text(text)
