import io
import logging

import pytest

from poison_grid.grid.board import build_board
from poison_grid.grid.parser import parse_tokens, parse_text, read_problem
from poison_grid.types import InvalidInputError, Problem


def test_parse_text_reads_dimensions_and_thresholds():
    problem = parse_text("3 4\n0 2 4\n")
    assert problem == Problem(rows=3, cols=4, eaten=[0, 2, 4])
    assert problem.shape == (3, 4)


def test_tokens_may_span_any_lines():
    problem = parse_text("2\n\n3   1\n\t2\n")
    assert problem.rows == 2 and problem.cols == 3
    assert problem.eaten == [1, 2]


def test_parse_tokens_accepts_a_plain_list():
    assert parse_tokens(["1", "1", "0"]).eaten == [0]


def test_read_problem_from_stream():
    problem = read_problem(io.StringIO("1 5 3"))
    assert problem.eaten == [3]


def test_zero_rows_is_valid():
    problem = parse_text("0 5")
    assert problem.rows == 0 and problem.eaten == []


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2",
        "2 2 0",
        "a 2 0 0",
        "2 2 0 x",
        "-1 2",
        "2 -3 0 0",
        "2 2 0 3",
        "1 2 -1",
    ],
)
def test_malformed_input_fails_fast(text):
    with pytest.raises(InvalidInputError):
        parse_text(text)


def test_invalid_input_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_text("1 1 2")


def test_extra_tokens_are_ignored_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="poison_grid"):
        problem = parse_text("1 2 1 9 9")
    assert problem.eaten == [1]
    assert "2 extra token" in caplog.text


@pytest.mark.parametrize("token", ["1_0", "٣", "３", "1.0", "0x1"])
def test_only_ascii_decimal_integers_are_accepted(token):
    with pytest.raises(InvalidInputError):
        parse_text(f"1 {token} 0")


def test_signed_integers_are_accepted():
    assert parse_text("+1 +2 -0").eaten == [0]


def test_range_errors_match_board_validation():
    with pytest.raises(InvalidInputError) as parsed:
        parse_text("1 2 3")
    with pytest.raises(InvalidInputError) as built:
        build_board(Problem(rows=1, cols=2, eaten=[3]))
    assert str(parsed.value) == str(built.value)


def test_read_problem_rejects_undecodable_stream():
    stream = io.TextIOWrapper(io.BytesIO(b"1 1 \xff"), encoding="utf-8")
    with pytest.raises(InvalidInputError):
        read_problem(stream)
