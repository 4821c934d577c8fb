import math

import pytest

from calculator.evaluator import (
    InsufficientOperands,
    MalformedExpression,
    MismatchedParenthesis,
    UnsupportedOperator,
    evaluate,
)
from calculator.tokenizer import InvalidNumber, tokenize


@pytest.mark.parametrize(
    "code, expected_ret_val",
    [
        pytest.param("1", 1.0),
        pytest.param("-1", -1.0),
        pytest.param("+1", 1.0),
        pytest.param("1+2", 3.0),
        pytest.param("(1+2)", 3.0),
        pytest.param("(((1)))", 1.0),
        pytest.param("1 * 4 + 5", 9.0),
        pytest.param("1 + 4 * 5", 21.0),
        pytest.param("(1+2)*3", 9.0),
        pytest.param("2-3*4", -10.0),
        pytest.param("10 / 5 / 2 / 2", 0.5),
        pytest.param("10 + 2 * (5 + 3 - 1)", 24.0),
        pytest.param("1.5e2 / 3", 50.0),
        pytest.param("2 ^ 0.5 ^ 2", 2**0.25),
        # precedence
        pytest.param("2+3*4", 14.0),
        pytest.param("2*3+4", 10.0),
        pytest.param("2*3^2", 18.0),
        # associativity
        pytest.param("8-4-2", 2.0),
        pytest.param("64/4/2", 8.0),
        pytest.param("2^3^2", 512.0),
        pytest.param("(2^3)^2", 64.0),
        # parentheses
        pytest.param("(2+3)*4", 20.0),
        pytest.param("2*(3+4)*5", 70.0),
        pytest.param("((2+3)*(4-1))^2", 225.0),
        # signs
        pytest.param("-3+5", 2.0),
        pytest.param("3+-2", 1.0),
        pytest.param("3+-3", 0.0),
        pytest.param("3--2", 5.0),
        pytest.param("3--3", 6.0),
        pytest.param("3 - -3", 6.0),
        pytest.param("2*-3", -6.0),
        pytest.param("(-3)^2", 9.0),
        pytest.param("-3^2", 9.0),
        pytest.param("2^-1", 0.5),
    ],
)
def test_eval_arithmetic(code: str, expected_ret_val: float) -> None:
    assert evaluate(tokenize(code)) == pytest.approx(expected_ret_val)


@pytest.mark.parametrize(
    "code, check",
    [
        pytest.param("1 / 0", lambda v: v == math.inf),
        pytest.param("-1 / 0", lambda v: v == -math.inf),
        pytest.param("1 / -0", lambda v: v == -math.inf),
        pytest.param("0 / 0", math.isnan),
        pytest.param("(-8) ^ 0.5", math.isnan),
        pytest.param("10 ^ 400", lambda v: v == math.inf),
        pytest.param("-10 ^ 401", lambda v: v == -math.inf),
        pytest.param("0 ^ -1", lambda v: v == math.inf),
        pytest.param("1e308 * 10", lambda v: v == math.inf),
    ],
)
def test_eval_follows_ieee_semantics(code: str, check) -> None:
    assert check(evaluate(tokenize(code)))


@pytest.mark.parametrize(
    "code, error_type",
    [
        pytest.param("(1+2", MismatchedParenthesis),
        pytest.param("1+2)", MismatchedParenthesis),
        pytest.param("((1)", MismatchedParenthesis),
        pytest.param(")(", MismatchedParenthesis),
        pytest.param("3%2", UnsupportedOperator),
        pytest.param("3 % 2 + 1", UnsupportedOperator),
        pytest.param("1 +", InsufficientOperands),
        pytest.param("* 2", InsufficientOperands),
        pytest.param("1 + * 2", InsufficientOperands),
        pytest.param("3 4", MalformedExpression),
        pytest.param("(1+2)-3", MalformedExpression),
        pytest.param("()", MalformedExpression),
        pytest.param("   ", MalformedExpression),
    ],
)
def test_eval_errors(code: str, error_type: type) -> None:
    with pytest.raises(error_type):
        evaluate(tokenize(code))


def test_unsupported_operator_carries_symbol() -> None:
    with pytest.raises(UnsupportedOperator) as exc_info:
        evaluate(tokenize("3%2"))
    assert exc_info.value.symbol == "%"
    assert exc_info.value.error_token_idx == 1


@pytest.mark.parametrize("code", ["--3", "- -3", "- 3", "3*(+)"])
def test_dangling_sign_is_invalid_number(code: str) -> None:
    with pytest.raises(InvalidNumber):
        tokenize(code)


def test_evaluation_error_points_at_token() -> None:
    with pytest.raises(MismatchedParenthesis) as exc_info:
        evaluate(tokenize("1 + 2)"))
    assert str(exc_info.value).splitlines() == [
        "[Evaluation error] Unmatched closing bracket",
        "1 + 2)",
        "     ^",
    ]


@pytest.mark.parametrize(
    "code, error_type, rendered, caret",
    [
        pytest.param("2 ^ 3 % 1", UnsupportedOperator, "2^3 % 1", "    ^"),
        pytest.param("( 2 ^ 3 ^ 1", MismatchedParenthesis, "(2^3^1", "^"),
        pytest.param("(1 + 2) * (", MismatchedParenthesis, "(1 + 2) * (", "          ^"),
        pytest.param("3 4", MalformedExpression, "3 4", "  ^"),
    ],
)
def test_evaluation_error_caret_follows_untokenized_line(code: str, error_type: type, rendered: str, caret: str) -> None:
    with pytest.raises(error_type) as exc_info:
        evaluate(tokenize(code))
    assert str(exc_info.value).splitlines()[1:] == [rendered, caret]


def test_non_ascii_digits_are_not_numbers() -> None:
    with pytest.raises(UnsupportedOperator) as exc_info:
        evaluate(tokenize("\u0663+1"))
    assert exc_info.value.symbol == "\u0663"


def test_evaluation_is_repeatable() -> None:
    code = "2 ^ 3 ^ 2 - (4 + 6) * 3 / 7"
    assert evaluate(tokenize(code)) == evaluate(tokenize(code))
