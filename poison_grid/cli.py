# -*- coding: utf-8 -*-
"""
コマンドラインのエントリポイントです。

    $ printf '2 2\n0 0\n' | python -m poison_grid
    4
    1 1
    1 2
    2 1
    2 2
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import solve
from .config import DEFAULT_OUTPUT_FORMAT, EXIT_INVALID_INPUT, OUTPUT_FORMATS, VERBOSE_LOG_LEVEL
from .grid.parser import read_problem
from .logging_utils import get_logger, set_log_level
from .postprocess.report import render
from .types import InvalidInputError

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poison-grid",
        description="Find the winning cells of a poisoned-grid game by backward DP.",
    )
    parser.add_argument(
        "-i",
        "--input",
        default=None,
        metavar="PATH",
        help="read the board from this file instead of stdin",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help="output format (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging on stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    set_log_level(VERBOSE_LOG_LEVEL if args.verbose else None)

    try:
        if args.input is None:
            problem = read_problem(sys.stdin)
        else:
            with open(args.input, encoding="utf-8") as f:
                problem = read_problem(f)
        result = solve(problem)
    except OSError as e:
        logger.error("Cannot read input: %s", e)
        return EXIT_INVALID_INPUT
    except InvalidInputError as e:
        logger.error("Invalid input: %s", e)
        return EXIT_INVALID_INPUT

    sys.stdout.write(render(result, args.format))
    return 0
