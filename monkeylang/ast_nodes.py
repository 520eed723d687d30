"""Abstract syntax tree for Monkey.

Every node variant is a frozen dataclass. Children are owned exclusively by
their parent and stored in tuples, so a tree never changes once the parser has
built it. ``str(node)`` renders the canonical, fully parenthesized form of a
node, which reconstructs the structure the parser settled on and is the basis
for precedence checks.

The :data:`Expression`, :data:`Statement` and :data:`Node` unions list every
variant; consumers dispatch over them with ``match``.


File: ast_nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from monkeylang.operations import Op


# ---- Expressions ----

@dataclass(frozen=True)
class Identifier:
    """A reference to a name."""
    value: str
    line: int = field(default=0, compare=False, repr=False)
    column: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntegerLiteral:
    value: int
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class BooleanLiteral:
    value: bool
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class StringLiteral:
    value: str
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(frozen=True)
class ArrayLiteral:
    elements: tuple[Expression, ...]
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return "[" + ", ".join(str(e) for e in self.elements) + "]"


@dataclass(frozen=True)
class MapLiteral:
    """
    A map literal. Pairs keep source order; keys are arbitrary expressions
    until evaluation decides whether they are usable as hash keys.
    """
    pairs: tuple[tuple[Expression, Expression], ...]
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.pairs) + "}"


@dataclass(frozen=True)
class PrefixExpression:
    operator: Op
    right: Expression
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return f"({self.operator.value}{self.right})"


@dataclass(frozen=True)
class InfixExpression:
    left: Expression
    operator: Op
    right: Expression
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return f"({self.left} {self.operator.value} {self.right})"


@dataclass(frozen=True)
class IfExpression:
    condition: Expression
    consequence: BlockStatement
    alternative: BlockStatement | None = None
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        out = f"if{self.condition} {self.consequence}"
        if self.alternative is not None:
            out += f"else {self.alternative}"
        return out


@dataclass(frozen=True)
class FunctionLiteral:
    parameters: tuple[Identifier, ...]
    body: BlockStatement
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        params = ", ".join(str(p) for p in self.parameters)
        return f"fn({params}) {self.body}"


@dataclass(frozen=True)
class CallExpression:
    function: Expression
    arguments: tuple[Expression, ...]
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        args = ", ".join(str(a) for a in self.arguments)
        return f"{self.function}({args})"


@dataclass(frozen=True)
class IndexExpression:
    left: Expression
    index: Expression
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return f"({self.left}[{self.index}])"


# ---- Statements ----

@dataclass(frozen=True)
class LetStatement:
    """``let <name> = <value>;``"""
    name: Identifier
    value: Expression
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return f"let {self.name} = {self.value};"


@dataclass(frozen=True)
class ReturnStatement:
    return_value: Expression
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return f"return {self.return_value};"


@dataclass(frozen=True)
class ExpressionStatement:
    expression: Expression
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return str(self.expression)


@dataclass(frozen=True)
class BlockStatement:
    statements: tuple[Statement, ...]
    line: int = field(default=0, compare=False, repr=False)

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


@dataclass(frozen=True)
class Program:
    """Root of every parse."""
    statements: tuple[Statement, ...]

    def __str__(self) -> str:
        return "".join(str(s) for s in self.statements)


Expression = Union[
    Identifier,
    IntegerLiteral,
    BooleanLiteral,
    StringLiteral,
    ArrayLiteral,
    MapLiteral,
    PrefixExpression,
    InfixExpression,
    IfExpression,
    FunctionLiteral,
    CallExpression,
    IndexExpression,
]

Statement = Union[LetStatement, ReturnStatement, ExpressionStatement, BlockStatement]

Node = Union[Program, Statement, Expression]


__all__ = [
    "Identifier",
    "IntegerLiteral",
    "BooleanLiteral",
    "StringLiteral",
    "ArrayLiteral",
    "MapLiteral",
    "PrefixExpression",
    "InfixExpression",
    "IfExpression",
    "FunctionLiteral",
    "CallExpression",
    "IndexExpression",
    "LetStatement",
    "ReturnStatement",
    "ExpressionStatement",
    "BlockStatement",
    "Program",
    "Expression",
    "Statement",
    "Node",
]
