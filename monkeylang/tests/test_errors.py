"""
Tests for runtime error values in Monkey Language.
"""
import pytest

from monkeylang.environment import new_environment
from monkeylang.interpreter import evaluate
from monkeylang.objects import Error
from monkeylang.tests.utils import parse_source, run_source


@pytest.mark.parametrize(
    "source, message",
    [
        ("5 + true;", "type mismatch: INTEGER + BOOLEAN"),
        ("5 + true; 5;", "type mismatch: INTEGER + BOOLEAN"),
        ("true == 1", "type mismatch: BOOLEAN == INTEGER"),
        ("-true", "unknown operator: -BOOLEAN"),
        ('-"a"', "unknown operator: -STRING"),
        ("true + false;", "unknown operator: BOOLEAN + BOOLEAN"),
        ("true > false;", "unknown operator: BOOLEAN > BOOLEAN"),
        ("5; true + false; 5", "unknown operator: BOOLEAN + BOOLEAN"),
        ("if (10 > 1) { true + false; }", "unknown operator: BOOLEAN + BOOLEAN"),
        (
            "if (10 > 1) { if (10 > 1) { return true + false; } return 1; }",
            "unknown operator: BOOLEAN + BOOLEAN",
        ),
        ('"Hello" - "World"', "unknown operator: STRING - STRING"),
        ("[1] + [2]", "unknown operator: ARRAY + ARRAY"),
        ("foobar", "identifier not found: foobar"),
        ('{"name": "Monkey"}[fn(x) { x }];', "unusable as hash key: FUNCTION"),
        ("let x = 5; x(1)", "not a function: INTEGER"),
        ('"abc"[0]', "index operator not supported: STRING"),
        ("fn(a) { a }()", "wrong number of arguments. got=0, want=1"),
        ("10 / (5 - 5)", "division by zero"),
    ],
)
def test_error_messages(source, message):
    """
    Test the message carried by each kind of runtime error.
    """
    assert run_source(source) == Error(message)


def test_error_inspect():
    """
    Test how an error value is displayed.
    """
    assert run_source("foobar").inspect() == "ERROR: identifier not found: foobar"


def test_error_stops_the_program():
    """
    Test that statements after an error are not evaluated.
    """
    source = "let a = 1; missing; let a = 2; a"
    assert run_source(source) == Error("identifier not found: missing")


def test_error_inside_array_literal_short_circuits():
    """
    Test that the first failing element is reported and the rest skipped.
    """
    assert run_source("[1, foo, bar]") == Error("identifier not found: foo")


def test_failed_let_does_not_bind():
    """
    Test that a let whose value fails leaves the name unbound.
    """
    env = new_environment()
    result = evaluate(parse_source("let x = 1 + true;"), env)
    assert result == Error("type mismatch: INTEGER + BOOLEAN")
    assert env.get("x") == (None, False)


def test_call_arguments_stop_at_first_error(capsys):
    """
    Test that arguments after a failing one are never evaluated.
    """
    result = run_source('let f = fn(a, b) { a }; f(missing, puts("side effect"))')
    assert result == Error("identifier not found: missing")
    assert capsys.readouterr().out == ""


def test_error_in_function_position():
    """
    Test that a failing callee is reported before its arguments run.
    """
    assert run_source("nope(1)") == Error("identifier not found: nope")


def test_error_in_map_value():
    """
    Test that an error while evaluating a map value propagates.
    """
    assert run_source('{"a": 1 + true}') == Error("type mismatch: INTEGER + BOOLEAN")


def test_error_in_condition():
    """
    Test that an error in an if condition propagates.
    """
    assert run_source("if (x) { 1 } else { 2 }") == Error("identifier not found: x")


def test_error_returned_from_function_body():
    """
    Test that an error raised inside a call reaches the caller unchanged.
    """
    source = "let f = fn() { let y = -true; 1 }; f() + 1"
    assert run_source(source) == Error("unknown operator: -BOOLEAN")
