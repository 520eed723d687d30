"""Shared definitions for operators and binding power.

Operator symbols carried by prefix and infix nodes, and the binding power
of each operator token. The parser reads both tables; the interpreter
dispatches on `Op`.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum, IntEnum


class Op(str, Enum):
    """
    Enumeration of supported operators.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    # Comparison
    EQ = "=="
    NE = "!="
    LT = "<"
    GT = ">"

    # Unary
    NOT = "!"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the operator symbol for nicer debug output.
        """
        return self.value


class Precedence(IntEnum):
    """
    Binding power of operators, lowest first.
    """
    LOWEST = 1
    EQUALS = 2
    LESSGREATER = 3
    SUM = 4
    PRODUCT = 5
    PREFIX = 6
    CALL = 7
    INDEX = 8


# Binding power of tokens appearing in infix or postfix position.
PRECEDENCES: dict[str, Precedence] = {
    'EQ': Precedence.EQUALS,
    'NOT_EQ': Precedence.EQUALS,
    'LT': Precedence.LESSGREATER,
    'GT': Precedence.LESSGREATER,
    'PLUS': Precedence.SUM,
    'MINUS': Precedence.SUM,
    'SLASH': Precedence.PRODUCT,
    'ASTERISK': Precedence.PRODUCT,
    'LPAREN': Precedence.CALL,
    'LBRACKET': Precedence.INDEX,
}

# Operator carried by each operator token.
TOKEN_OPS: dict[str, Op] = {
    'PLUS': Op.ADD,
    'MINUS': Op.SUB,
    'ASTERISK': Op.MUL,
    'SLASH': Op.DIV,
    'EQ': Op.EQ,
    'NOT_EQ': Op.NE,
    'LT': Op.LT,
    'GT': Op.GT,
    'BANG': Op.NOT,
}


__all__ = ["Op", "Precedence", "PRECEDENCES", "TOKEN_OPS"]
