"""
Tests for booleans, comparisons and if expressions in Monkey Language.
"""
import pytest

from monkeylang.objects import FALSE, NULL, TRUE, Integer
from monkeylang.tests.utils import run_source


@pytest.mark.parametrize(
    "source, expected",
    [
        ("true", True),
        ("false", False),
        ("1 < 2", True),
        ("1 > 2", False),
        ("1 < 1", False),
        ("1 > 1", False),
        ("1 == 1", True),
        ("1 != 1", False),
        ("1 == 2", False),
        ("1 != 2", True),
        ("true == true", True),
        ("false == false", True),
        ("true == false", False),
        ("true != false", True),
        ("false != true", True),
        ("(1 < 2) == true", True),
        ("(1 < 2) == false", False),
        ("(1 > 2) == true", False),
        ("(1 > 2) == false", True),
    ],
)
def test_boolean_expressions(source, expected):
    """
    Test comparisons produce the canonical booleans.
    """
    assert run_source(source) is (TRUE if expected else FALSE)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("!true", False),
        ("!false", True),
        ("!5", False),
        ("!0", False),
        ('!""', False),
        ("!!true", True),
        ("!!false", False),
        ("!!5", True),
        ("!if (false) { 1 }", True),
    ],
)
def test_bang_operator(source, expected):
    """
    Test that only false and null are falsy.
    """
    assert run_source(source) is (TRUE if expected else FALSE)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("if (true) { 10 }", 10),
        ("if (false) { 10 }", None),
        ("if (1) { 10 }", 10),
        ("if (0) { 10 }", 10),
        ("if (1 < 2) { 10 }", 10),
        ("if (1 > 2) { 10 }", None),
        ("if (1 > 2) { 10 } else { 20 }", 20),
        ("if (1 < 2) { 10 } else { 20 }", 10),
        ("if ([]) { 10 }", 10),
        ("if (if (false) { 1 }) { 10 } else { 20 }", 20),
        ("if (true) { }", None),
    ],
)
def test_if_else_expressions(source, expected):
    """
    Test conditional evaluation and the truthiness rule.
    """
    result = run_source(source)
    if expected is None:
        assert result is NULL
    else:
        assert result == Integer(expected)


def test_identity_equality_for_other_types():
    """
    Test that values other than integers and strings compare by identity.
    """
    assert run_source("let f = fn() { 1 }; f == f") is TRUE
    assert run_source("fn() { 1 } == fn() { 1 }") is FALSE
    assert run_source("let a = [1]; a == a") is TRUE
    assert run_source("[1] == [1]") is FALSE
    assert run_source("[1] != [1]") is TRUE
    assert run_source("if (false) { 1 } == if (false) { 2 }") is TRUE
