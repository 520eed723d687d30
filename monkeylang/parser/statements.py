"""Statement parsing utilities for Monkey.

These functions operate on a `monkeylang.parser.parser.Parser` instance and
handle the statement forms of the language: ``let`` bindings, ``return``
statements, bare expression statements and brace delimited blocks.

A trailing semicolon is optional after every statement.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from monkeylang.ast_nodes import (
    BlockStatement,
    ExpressionStatement,
    Identifier,
    LetStatement,
    ReturnStatement,
    Statement,
)

if TYPE_CHECKING:
    from monkeylang.parser import Parser


def parse_block(parser: 'Parser') -> Optional[BlockStatement]:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    Args:
        parser: The parser instance, positioned on the opening brace.

    Returns:
        BlockStatement, or None if the input ended before the closing brace.
    """
    tok = parser.curr_token
    depth = parser.brace_depth
    parser.next_token()
    statements = []
    while not parser.curr_token_is('RBRACE'):
        if parser.curr_token_is('EOF'):
            parser.add_error(
                "expected next token to be RBRACE, got EOF instead",
                parser.curr_token.line,
            )
            return None
        stmt = parser.statement()
        if stmt is not None:
            statements.append(stmt)
        elif parser.curr_token_is('RBRACE') and parser.brace_depth < depth:
            # The statement failed on this block's own closing brace.
            continue
        else:
            parser.synchronize()
        parser.next_token()
    return BlockStatement(tuple(statements), tok.line)


def parse_statement(parser: 'Parser') -> Optional[Statement]:
    """
    Parse a single statement.

    Syntax:
        <statement>

    Args:
        parser: The parser instance.

    Returns:
        Statement node, or None on failure.
    """
    tok = parser.curr_token
    if tok.type == 'LET':
        return parser.parse_let()
    elif tok.type == 'RETURN':
        return parser.parse_return()
    else:
        return parser.parse_expression_statement()


def parse_let(parser: 'Parser') -> Optional[Statement]:
    """
    Parse a 'let' binding.

    Syntax:
        let <identifier> = <expression>;

    Args:
        parser: The parser instance.

    Returns:
        LetStatement, or None on failure.
    """
    tok = parser.curr_token
    if not parser.expect_peek('IDENT'):
        return None
    tok_name = parser.curr_token
    name = Identifier(tok_name.literal, tok_name.line, tok_name.column)
    if not parser.expect_peek('ASSIGN'):
        return None
    parser.next_token()
    value = parser.expr()
    if value is None:
        return None
    if parser.peek_token_is('SEMICOLON'):
        parser.next_token()
    return LetStatement(name, value, tok.line)


def parse_return(parser: 'Parser') -> Optional[Statement]:
    """
    Parse a 'return' statement.

    Syntax:
        return <expression>;

    Args:
        parser: The parser instance.

    Returns:
        ReturnStatement, or None on failure.
    """
    tok = parser.curr_token
    parser.next_token()
    value = parser.expr()
    if value is None:
        return None
    if parser.peek_token_is('SEMICOLON'):
        parser.next_token()
    return ReturnStatement(value, tok.line)


def parse_expression_statement(parser: 'Parser') -> Optional[Statement]:
    """
    Parse an expression used as a statement.

    Syntax:
        <expression>;
    """
    tok = parser.curr_token
    expr_node = parser.expr()
    if expr_node is None:
        return None
    if parser.peek_token_is('SEMICOLON'):
        parser.next_token()
    return ExpressionStatement(expr_node, tok.line)
