"""Builtin functions for Monkey.

The registry maps names to :class:`~monkeylang.objects.Builtin` values. The
interpreter consults it whenever a name is not bound in any scope, so user
bindings shadow builtins. Builtins check their own arguments and report bad
calls as Error values. None of them modifies its arguments; ``push`` and
``rest`` build new arrays.


File: natives.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from types import MappingProxyType
from typing import Mapping

from monkeylang.objects import (
    NULL,
    Array,
    Builtin,
    Error,
    Integer,
    Object,
    String,
)


def _wrong_arity(got: int, want: int) -> Error:
    return Error(f"wrong number of arguments. got={got}, want={want}")


def _len(*args: Object) -> Object:
    """Length of a string in characters, or of an array in elements."""
    if len(args) != 1:
        return _wrong_arity(len(args), 1)
    arg = args[0]
    if isinstance(arg, String):
        return Integer(len(arg.value))
    if isinstance(arg, Array):
        return Integer(len(arg.elements))
    return Error(f"argument to `len` not supported. got {arg.type()}")


def _first(*args: Object) -> Object:
    if len(args) != 1:
        return _wrong_arity(len(args), 1)
    arg = args[0]
    if not isinstance(arg, Array):
        return Error(f"argument to `first` must be ARRAY, got {arg.type()}")
    return arg.elements[0] if arg.elements else NULL


def _last(*args: Object) -> Object:
    if len(args) != 1:
        return _wrong_arity(len(args), 1)
    arg = args[0]
    if not isinstance(arg, Array):
        return Error(f"argument to `last` must be ARRAY, got {arg.type()}")
    return arg.elements[-1] if arg.elements else NULL


def _rest(*args: Object) -> Object:
    """Everything but the first element, as a new array."""
    if len(args) != 1:
        return _wrong_arity(len(args), 1)
    arg = args[0]
    if not isinstance(arg, Array):
        return Error(f"argument to `rest` must be ARRAY, got {arg.type()}")
    if not arg.elements:
        return NULL
    return Array(arg.elements[1:])


def _push(*args: Object) -> Object:
    """A new array with the value appended."""
    if len(args) != 2:
        return _wrong_arity(len(args), 2)
    arr, value = args
    if not isinstance(arr, Array):
        return Error(f"argument to `push` must be ARRAY, got {arr.type()}")
    return Array(arr.elements + (value,))


def _puts(*args: Object) -> Object:
    for arg in args:
        print(arg.inspect())
    return NULL


BUILTINS: Mapping[str, Builtin] = MappingProxyType({
    name: Builtin(name, fn)
    for name, fn in (
        ("len", _len),
        ("first", _first),
        ("last", _last),
        ("rest", _rest),
        ("push", _push),
        ("puts", _puts),
    )
})
