"""
Tests for variable scoping in Monkey Language.
"""
from monkeylang.objects import Error, Integer
from monkeylang.tests.utils import run_source


def test_let_bindings():
    """
    Test that let binds a value readable by later statements.
    """
    assert run_source("let a = 5; a;") == Integer(5)
    assert run_source("let a = 5 * 5; a;") == Integer(25)
    assert run_source("let a = 5; let b = a; b;") == Integer(5)
    assert run_source("let a = 5; let b = a; let c = a + b + 5; c;") == Integer(15)


def test_rebinding_replaces_value():
    """
    Test that a second let of the same name in the same scope replaces it.
    """
    assert run_source("let a = 1; let a = a + 1; a") == Integer(2)


def test_scope_is_lexical():
    """
    Test that a function sees the scope it was defined in, not its caller's.
    """
    source = (
        "let x = 1;\n"
        "let f = fn() { x };\n"
        "let g = fn(x) { f() };\n"
        "g(100);\n"
    )
    assert run_source(source) == Integer(1)


def test_caller_locals_are_invisible():
    """
    Test that names local to a caller cannot be read by the callee.
    """
    source = (
        "let f = fn() { secret };\n"
        "let g = fn() { let secret = 42; f() };\n"
        "g();\n"
    )
    assert run_source(source) == Error("identifier not found: secret")


def test_parameters_shadow_outer_names():
    """
    Test that a parameter hides an outer binding of the same name.
    """
    assert run_source("let x = 10; let f = fn(x) { x * 2 }; f(3)") == Integer(6)
    assert run_source("let x = 10; let f = fn(x) { x * 2 }; f(3); x") == Integer(10)


def test_let_inside_function_does_not_leak():
    """
    Test that a let in a function body binds only in the call scope.
    """
    source = "let x = 1; let f = fn() { let x = 2; x }; [f(), x]"
    assert run_source(source).inspect() == "[2, 1]"
    assert run_source("let f = fn() { let y = 2; y }; f(); y") == Error(
        "identifier not found: y"
    )


def test_blocks_share_the_enclosing_scope():
    """
    Test that if blocks do not introduce a scope of their own.
    """
    assert run_source("if (true) { let z = 3; }; z") == Integer(3)


def test_closure_sees_later_bindings():
    """
    Test that a closure reads its scope when called, not when created.
    """
    source = "let g = fn() { later }; let later = 5; g()"
    assert run_source(source) == Integer(5)
