"""Runtime values for Monkey.

Every value the interpreter produces is one of the classes below. Each exposes
``type()``, the tag used in error messages, and ``inspect()``, the form shown to
users. Values are never changed after construction; operations build new ones.

``TRUE``, ``FALSE`` and ``NULL`` are the only Boolean and Null instances that
ever exist, so the interpreter compares them by identity.


File: objects.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping, NamedTuple, Union

from monkeylang.ast_nodes import BlockStatement, Identifier

if TYPE_CHECKING:
    from monkeylang.environment import Environment


class ObjectType(str, Enum):
    """
    Type tags of runtime values.
    """
    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    STRING = "STRING"
    ARRAY = "ARRAY"
    HASH = "HASH"
    FUNCTION = "FUNCTION"
    BUILTIN = "BUILTIN"
    ERROR = "ERROR"
    NULL = "NULL"
    RETURN_VALUE = "RETURN_VALUE"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


class HashKey(NamedTuple):
    """
    Lookup key of a map entry. The type tag keeps ``1`` and ``true`` apart
    even though Python treats them as equal.
    """
    type: ObjectType
    value: Union[int, bool, str]


@dataclass(frozen=True)
class Integer:
    value: int

    def type(self) -> ObjectType:
        return ObjectType.INTEGER

    def inspect(self) -> str:
        return str(self.value)

    def hash_key(self) -> HashKey:
        return HashKey(ObjectType.INTEGER, self.value)


@dataclass(frozen=True)
class Boolean:
    value: bool

    def type(self) -> ObjectType:
        return ObjectType.BOOLEAN

    def inspect(self) -> str:
        return "true" if self.value else "false"

    def hash_key(self) -> HashKey:
        return HashKey(ObjectType.BOOLEAN, self.value)


@dataclass(frozen=True)
class String:
    value: str

    def type(self) -> ObjectType:
        return ObjectType.STRING

    def inspect(self) -> str:
        return self.value

    def hash_key(self) -> HashKey:
        return HashKey(ObjectType.STRING, self.value)


@dataclass(frozen=True)
class Null:
    def type(self) -> ObjectType:
        return ObjectType.NULL

    def inspect(self) -> str:
        return "null"


@dataclass(frozen=True)
class Array:
    elements: tuple[Object, ...]

    def type(self) -> ObjectType:
        return ObjectType.ARRAY

    def inspect(self) -> str:
        return "[" + ", ".join(e.inspect() for e in self.elements) + "]"


class HashPair(NamedTuple):
    """The key object as written and its value."""
    key: Object
    value: Object


@dataclass(frozen=True, eq=False)
class Hash:
    """
    A map value. Entries are keyed by :class:`HashKey` and keep the order in
    which their keys were first written.
    """
    pairs: Mapping[HashKey, HashPair]

    def __post_init__(self) -> None:
        object.__setattr__(self, "pairs", MappingProxyType(dict(self.pairs)))

    def type(self) -> ObjectType:
        return ObjectType.HASH

    def inspect(self) -> str:
        items = ", ".join(
            f"{pair.key.inspect()}: {pair.value.inspect()}" for pair in self.pairs.values()
        )
        return "{" + items + "}"


@dataclass(frozen=True, eq=False)
class Function:
    """
    A closure: parameters and body together with the environment that was
    executing when the function literal was evaluated.
    """
    parameters: tuple[Identifier, ...]
    body: BlockStatement
    env: Environment = field(repr=False)

    def type(self) -> ObjectType:
        return ObjectType.FUNCTION

    def inspect(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"fn({params}) {{\n{self.body}\n}}"


@dataclass(frozen=True, eq=False)
class Builtin:
    """A function implemented in Python."""
    name: str
    fn: Callable[..., Object] = field(repr=False)

    def type(self) -> ObjectType:
        return ObjectType.BUILTIN

    def inspect(self) -> str:
        return "builtin function"


@dataclass(frozen=True)
class Error:
    """A runtime failure, carried through evaluation as an ordinary value."""
    message: str

    def type(self) -> ObjectType:
        return ObjectType.ERROR

    def inspect(self) -> str:
        return f"ERROR: {self.message}"


@dataclass(frozen=True)
class ReturnValue:
    """
    Wraps the value of a ``return`` statement while it unwinds to the
    nearest call. Never visible outside the interpreter.
    """
    value: Object

    def type(self) -> ObjectType:
        return ObjectType.RETURN_VALUE

    def inspect(self) -> str:
        return self.value.inspect()


Object = Union[Integer, Boolean, String, Null, Array, Hash, Function, Builtin, Error, ReturnValue]

Hashable = (Integer, Boolean, String)

TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


def native_bool_to_boolean(value: bool) -> Boolean:
    """
    Return the canonical Boolean for a Python bool.
    """
    return TRUE if value else FALSE


def is_error(obj: Object) -> bool:
    return isinstance(obj, Error)


__all__ = [
    "ObjectType",
    "HashKey",
    "HashPair",
    "Integer",
    "Boolean",
    "String",
    "Null",
    "Array",
    "Hash",
    "Function",
    "Builtin",
    "Error",
    "ReturnValue",
    "Object",
    "Hashable",
    "TRUE",
    "FALSE",
    "NULL",
    "native_bool_to_boolean",
    "is_error",
]
