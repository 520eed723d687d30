"""
Main parser entry point for Monkey.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`monkeylang.parser.expressions` and `monkeylang.parser.statements`.

The parser never raises on bad input. Problems are recorded as diagnostics
and parsing carries on from the next statement boundary, so a single run can
report several of them. A non-empty diagnostic list means the tree must not
be evaluated.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from monkeylang.ast_nodes import BlockStatement, Expression, Program, Statement
from monkeylang.lexer import Token
from monkeylang.operations import PRECEDENCES, Precedence

from . import expressions as _expr
from . import statements as _stmt


@dataclass(frozen=True)
class Diagnostic:
    """A parse problem and the line it was found on."""
    message: str
    line: int

    def __str__(self) -> str:
        return f"{self.message} on line {self.line}"


class Parser:
    """Monkey parser."""

    def __init__(self, tokens: Iterable[Token], file: str = "<stdin>"):
        """
        Initialize the parser with a stream of tokens.

        Parameters:
            tokens (Iterable[Token]): Tokens, typically the generator returned
                by :func:`monkeylang.lexer.tokenize`.
            file (str): The name of the script.
        """
        self._tokens = iter(tokens)
        self.source_file = file
        self.diagnostics: list[Diagnostic] = []
        # Braces opened and not yet closed, counting the current token.
        self.brace_depth = 0

        self.prefix_parse_fns: dict[str, Callable[['Parser'], Optional[Expression]]] = {
            'IDENT': _expr.parse_identifier,
            'INT': _expr.parse_integer_literal,
            'STRING': _expr.parse_string_literal,
            'TRUE': _expr.parse_boolean,
            'FALSE': _expr.parse_boolean,
            'BANG': _expr.parse_prefix_expression,
            'MINUS': _expr.parse_prefix_expression,
            'LPAREN': _expr.parse_grouped_expression,
            'IF': _expr.parse_if_expression,
            'FUNCTION': _expr.parse_function_literal,
            'LBRACKET': _expr.parse_array_literal,
            'LBRACE': _expr.parse_map_literal,
        }
        self.infix_parse_fns: dict[str, Callable[['Parser', Expression], Optional[Expression]]] = {
            'PLUS': _expr.parse_infix_expression,
            'MINUS': _expr.parse_infix_expression,
            'SLASH': _expr.parse_infix_expression,
            'ASTERISK': _expr.parse_infix_expression,
            'EQ': _expr.parse_infix_expression,
            'NOT_EQ': _expr.parse_infix_expression,
            'LT': _expr.parse_infix_expression,
            'GT': _expr.parse_infix_expression,
            'LPAREN': _expr.parse_call_expression,
            'LBRACKET': _expr.parse_index_expression,
        }

        self.curr_token: Token = Token('EOF', '', 1)
        self.peek_token: Token = Token('EOF', '', 1)
        # Read two tokens so both curr_token and peek_token are set.
        self.next_token()
        self.next_token()

    @property
    def errors(self) -> list[str]:
        """
        Diagnostics rendered as strings, in the order they were found.
        """
        return [str(d) for d in self.diagnostics]

    def next_token(self) -> None:
        """
        Advance by one token. Once the stream is exhausted the parser keeps
        sitting on ``EOF``.
        """
        self.curr_token = self.peek_token
        if self.curr_token.type == 'LBRACE':
            self.brace_depth += 1
        elif self.curr_token.type == 'RBRACE':
            self.brace_depth -= 1
        nxt = next(self._tokens, None)
        if nxt is None:
            nxt = Token('EOF', '', self.curr_token.line)
        self.peek_token = nxt

    def curr_token_is(self, token_type: str) -> bool:
        return self.curr_token.type == token_type

    def peek_token_is(self, token_type: str) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: str) -> bool:
        """
        Advance if the next token has the expected type.

        Parameters:
            token_type (str): The expected token type.

        Returns:
            bool: True if the parser advanced, False if a diagnostic was
                recorded instead.
        """
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        self.add_error(
            f"expected next token to be {token_type}, "
            f"got {self.peek_token.type} instead",
            self.peek_token.line,
        )
        return False

    def add_error(self, message: str, line: int) -> None:
        """
        Record a diagnostic.
        """
        self.diagnostics.append(Diagnostic(message, line))

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def curr_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.curr_token.type, Precedence.LOWEST)

    def synchronize(self) -> None:
        """
        Skip the rest of a statement that failed to parse. Stops on a
        semicolon, or just before a closing brace or the end of input, so
        the enclosing loop resumes at the next statement. Braces opened while
        skipping are skipped along with their contents.
        """
        depth = 0
        while not self.curr_token_is('EOF'):
            if self.curr_token_is('LBRACE'):
                depth += 1
            elif self.curr_token_is('RBRACE') and depth > 0:
                depth -= 1
            if depth == 0 and (
                self.curr_token_is('SEMICOLON')
                or self.peek_token_is('RBRACE')
                or self.peek_token_is('EOF')
            ):
                return
            self.next_token()


    # Expression wrappers
    def expr(self, precedence: Precedence = Precedence.LOWEST) -> Optional[Expression]:
        """
        Parse an expression binding tighter than ``precedence``.
        """
        return _expr.parse_expression(self, precedence)

    def expression_list(self, end: str) -> Optional[tuple[Expression, ...]]:
        """
        Parse a comma separated list of expressions closed by ``end``.
        """
        return _expr.parse_expression_list(self, end)


    # Statement wrappers
    def block(self) -> Optional[BlockStatement]:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def statement(self) -> Optional[Statement]:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_let(self) -> Optional[Statement]:
        """
        Parse a 'let' binding statement.
        """
        return _stmt.parse_let(self)

    def parse_return(self) -> Optional[Statement]:
        """
        Parse a 'return' statement from within a function.
        """
        return _stmt.parse_return(self)

    def parse_expression_statement(self) -> Optional[Statement]:
        """
        Parse a bare expression used as a statement.
        """
        return _stmt.parse_expression_statement(self)


    def parse(self) -> Program:
        """
        Parse the full input into a program.
        """
        statements = []
        while not self.curr_token_is('EOF'):
            stmt = self.statement()
            if stmt is not None:
                statements.append(stmt)
            else:
                self.synchronize()
            self.next_token()
        return Program(tuple(statements))

    def parse_program(self) -> tuple[Program, list[str]]:
        """
        Parse the full input.

        Returns:
            tuple: The program, holding every statement that parsed cleanly,
                and the diagnostics found along the way. Input nested deeper
                than the host stack allows gives an empty program and a
                diagnostic saying so.
        """
        try:
            program = self.parse()
        except RecursionError:
            self.add_error("maximum recursion depth exceeded", self.curr_token.line)
            program = Program(())
        return program, self.errors
