"""
Expression parsing utilities for Monkey.

These functions operate on a `monkeylang.parser.parser.Parser` instance and
implement Pratt style operator precedence parsing. Each token type that may
start an expression has a prefix function, and each token that may follow an
expression (binary operators, call parentheses, index brackets) has an infix
function. Every function returns ``None`` when it could not build a complete
node; the diagnostic has already been recorded by then.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from monkeylang.ast_nodes import (
    ArrayLiteral,
    BooleanLiteral,
    CallExpression,
    Expression,
    FunctionLiteral,
    Identifier,
    IfExpression,
    IndexExpression,
    InfixExpression,
    IntegerLiteral,
    MapLiteral,
    PrefixExpression,
    StringLiteral,
)
from monkeylang.operations import TOKEN_OPS, Precedence

if TYPE_CHECKING:
    from monkeylang.parser import Parser


INT64_MAX = 2 ** 63 - 1


# ---- Entry point ----

def parse_expression(parser: 'Parser', precedence: Precedence) -> Optional[Expression]:
    """
    Parse an expression.

    A prefix production handles the current token, then infix productions
    fold in following operators for as long as they bind tighter than
    ``precedence``. Equal precedence stops the loop, which makes operators
    of one level left associative.

    Args:
        parser: The parser instance.
        precedence: Binding power of the operator to the left.

    Returns:
        Expression node, or None on failure.
    """
    prefix = parser.prefix_parse_fns.get(parser.curr_token.type)
    if prefix is None:
        parser.add_error(
            f"no prefix parse function for {parser.curr_token.type} found",
            parser.curr_token.line,
        )
        return None
    left = prefix(parser)

    while (
        left is not None
        and not parser.peek_token_is('SEMICOLON')
        and precedence < parser.peek_precedence()
    ):
        infix = parser.infix_parse_fns.get(parser.peek_token.type)
        if infix is None:
            return left
        parser.next_token()
        left = infix(parser, left)

    return left


def parse_expression_list(parser: 'Parser', end: str) -> Optional[tuple[Expression, ...]]:
    """
    Parse a comma separated list of expressions.

    Syntax:
        <expr> (, <expr>)* <end>

    Args:
        parser: The parser instance, positioned on the opening delimiter.
        end: Token type closing the list.

    Returns:
        tuple of expression nodes, or None on failure.
    """
    items = []
    if parser.peek_token_is(end):
        parser.next_token()
        return ()

    parser.next_token()
    while True:
        item = parser.expr()
        if item is None:
            return None
        items.append(item)
        if not parser.peek_token_is('COMMA'):
            break
        parser.next_token()
        parser.next_token()

    if not parser.expect_peek(end):
        return None
    return tuple(items)


# ---- Prefix productions ----

def parse_identifier(parser: 'Parser') -> Expression:
    tok = parser.curr_token
    return Identifier(tok.literal, tok.line, tok.column)


def parse_integer_literal(parser: 'Parser') -> Optional[Expression]:
    """Parse a decimal integer that must fit a signed 64-bit value."""
    tok = parser.curr_token
    value = int(tok.literal)
    if value > INT64_MAX:
        parser.add_error(f"could not parse {tok.literal} as integer", tok.line)
        return None
    return IntegerLiteral(value, tok.line)


def parse_string_literal(parser: 'Parser') -> Expression:
    tok = parser.curr_token
    return StringLiteral(tok.literal, tok.line)


def parse_boolean(parser: 'Parser') -> Expression:
    tok = parser.curr_token
    return BooleanLiteral(tok.type == 'TRUE', tok.line)


def parse_prefix_expression(parser: 'Parser') -> Optional[Expression]:
    """
    Parse a unary operator applied to an operand.

    Syntax:
        ! <expr> | - <expr>
    """
    tok = parser.curr_token
    parser.next_token()
    right = parser.expr(Precedence.PREFIX)
    if right is None:
        return None
    return PrefixExpression(TOKEN_OPS[tok.type], right, tok.line)


def parse_grouped_expression(parser: 'Parser') -> Optional[Expression]:
    """
    Parse a parenthesized expression, which restarts at the lowest
    precedence.
    """
    parser.next_token()
    node = parser.expr()
    if node is None or not parser.expect_peek('RPAREN'):
        return None
    return node


def parse_if_expression(parser: 'Parser') -> Optional[Expression]:
    """
    Parse a conditional expression with an optional else block.

    Syntax:
        if (<condition>) { <block> } [else { <block> }]
    """
    tok = parser.curr_token
    if not parser.expect_peek('LPAREN'):
        return None
    parser.next_token()
    condition = parser.expr()
    if condition is None or not parser.expect_peek('RPAREN'):
        return None
    if not parser.expect_peek('LBRACE'):
        return None
    consequence = parser.block()
    if consequence is None:
        return None

    alternative = None
    if parser.peek_token_is('ELSE'):
        parser.next_token()
        if not parser.expect_peek('LBRACE'):
            return None
        alternative = parser.block()
        if alternative is None:
            return None

    return IfExpression(condition, consequence, alternative, tok.line)


def _parse_function_parameters(parser: 'Parser') -> Optional[tuple[Identifier, ...]]:
    """
    Parse the parameter list of a function literal.

    Syntax:
        ( [<identifier> (, <identifier>)*] )
    """
    params = []
    if parser.peek_token_is('RPAREN'):
        parser.next_token()
        return ()

    if not parser.expect_peek('IDENT'):
        return None
    params.append(parse_identifier(parser))
    while parser.peek_token_is('COMMA'):
        parser.next_token()
        if not parser.expect_peek('IDENT'):
            return None
        params.append(parse_identifier(parser))

    if not parser.expect_peek('RPAREN'):
        return None
    return tuple(params)


def parse_function_literal(parser: 'Parser') -> Optional[Expression]:
    """
    Parse a function literal.

    Syntax:
        fn(<params>) { <block> }
    """
    tok = parser.curr_token
    if not parser.expect_peek('LPAREN'):
        return None
    params = _parse_function_parameters(parser)
    if params is None:
        return None
    if not parser.expect_peek('LBRACE'):
        return None
    body = parser.block()
    if body is None:
        return None
    return FunctionLiteral(params, body, tok.line)


def parse_array_literal(parser: 'Parser') -> Optional[Expression]:
    """
    Parse an array literal.

    Syntax:
        [ <expr>, ... ]
    """
    tok = parser.curr_token
    elements = parser.expression_list('RBRACKET')
    if elements is None:
        return None
    return ArrayLiteral(elements, tok.line)


def parse_map_literal(parser: 'Parser') -> Optional[Expression]:
    """
    Parse a map literal. Keys may be any expression.

    Syntax:
        { <expr>: <expr>, ... }
    """
    tok = parser.curr_token
    pairs = []
    while not parser.peek_token_is('RBRACE'):
        parser.next_token()
        key = parser.expr()
        if key is None or not parser.expect_peek('COLON'):
            return None
        parser.next_token()
        value = parser.expr()
        if value is None:
            return None
        pairs.append((key, value))
        if not parser.peek_token_is('RBRACE') and not parser.expect_peek('COMMA'):
            return None

    if not parser.expect_peek('RBRACE'):
        return None
    return MapLiteral(tuple(pairs), tok.line)


# ---- Infix productions ----

def parse_infix_expression(parser: 'Parser', left: Expression) -> Optional[Expression]:
    """Parse a binary operator and its right operand."""
    tok = parser.curr_token
    precedence = parser.curr_precedence()
    parser.next_token()
    right = parser.expr(precedence)
    if right is None:
        return None
    return InfixExpression(left, TOKEN_OPS[tok.type], right, tok.line)


def parse_call_expression(parser: 'Parser', function: Expression) -> Optional[Expression]:
    """
    Parse a call applied to the expression on the left.

    Syntax:
        <expr>(<args>)
    """
    tok = parser.curr_token
    arguments = parser.expression_list('RPAREN')
    if arguments is None:
        return None
    return CallExpression(function, arguments, tok.line)


def parse_index_expression(parser: 'Parser', left: Expression) -> Optional[Expression]:
    """
    Parse an index applied to the expression on the left.

    Syntax:
        <expr>[<expr>]
    """
    tok = parser.curr_token
    parser.next_token()
    index = parser.expr()
    if index is None or not parser.expect_peek('RBRACKET'):
        return None
    return IndexExpression(left, index, tok.line)
