"""
Tests for integer arithmetic in Monkey Language.
"""
import pytest

from monkeylang.objects import Error, Integer
from monkeylang.tests.utils import run_source


@pytest.mark.parametrize(
    "source, expected",
    [
        ("5", 5),
        ("10", 10),
        ("-5", -5),
        ("-10", -10),
        ("5 + 5 + 5 + 5 - 10", 10),
        ("2 * 2 * 2 * 2 * 2", 32),
        ("-50 + 100 + -50", 0),
        ("5 * 2 + 10", 20),
        ("5 + 2 * 10", 25),
        ("20 + 2 * -10", 0),
        ("50 / 2 * 2 + 10", 60),
        ("2 * (5 + 10)", 30),
        ("3 * 3 * 3 + 10", 37),
        ("3 * (3 * 3) + 10", 37),
        ("(5 + 10 * 2 + 15 / 3) * 2 + -10", 50),
    ],
)
def test_integer_expressions(source, expected):
    """
    Test integer arithmetic and precedence at runtime.
    """
    assert run_source(source) == Integer(expected)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("7 / 2", 3),
        ("-7 / 2", -3),
        ("7 / -2", -3),
        ("-7 / -2", 3),
        ("1 / 3", 0),
        ("-1 / 3", 0),
    ],
)
def test_division_truncates_toward_zero(source, expected):
    """
    Test that division truncates rather than floors.
    """
    assert run_source(source) == Integer(expected)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("9223372036854775807 + 1", -9223372036854775808),
        ("-9223372036854775807 - 1 - 1", 9223372036854775807),
        ("4611686018427387904 * 2", -9223372036854775808),
        ("-(-9223372036854775807 - 1)", -9223372036854775808),
        ("(-9223372036854775807 - 1) / -1", -9223372036854775808),
    ],
)
def test_integers_wrap_at_64_bits(source, expected):
    """
    Test two's complement wrap-around on overflow.
    """
    assert run_source(source) == Integer(expected)


def test_division_by_zero_is_an_error():
    """
    Test that dividing by zero yields an error value.
    """
    assert run_source("10 / (5 - 5)") == Error("division by zero")
