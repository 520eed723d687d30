"""
Tests for Monkey Language environments.
"""
from monkeylang.environment import Environment, new_enclosed_environment, new_environment
from monkeylang.objects import Integer


def test_get_and_set():
    """
    Test binding and resolving a name in a single scope.
    """
    env = new_environment()
    assert env.get("x") == (None, False)
    assert env.set("x", Integer(1)) == Integer(1)
    assert env.get("x") == (Integer(1), True)


def test_enclosed_environment_keeps_its_outer_scope():
    """
    Test that an enclosed environment falls back to the given outer scope.
    """
    outer = new_environment()
    inner = new_enclosed_environment(outer)
    assert inner.outer is outer
    assert outer.outer is None

    outer.set("x", Integer(1))
    assert inner.get("x") == (Integer(1), True)


def test_lookup_walks_the_whole_chain():
    """
    Test that lookups continue past the immediate outer scope.
    """
    root = Environment()
    root.set("a", Integer(1))
    middle = Environment(root)
    leaf = Environment(middle)
    assert leaf.get("a") == (Integer(1), True)
    assert leaf.get("b") == (None, False)


def test_set_never_writes_outward():
    """
    Test that binding in an inner scope shadows without touching the outer.
    """
    outer = new_environment()
    outer.set("x", Integer(1))
    inner = new_enclosed_environment(outer)
    inner.set("x", Integer(2))
    assert inner.get("x") == (Integer(2), True)
    assert outer.get("x") == (Integer(1), True)
    assert "x" in inner.store
