"""Lexer for Monkey.

This lexer performs a single pass over the source code using a combined
regular expression of named groups. Each match yields a :class:`Token`
containing its type, literal text, source line and column. Tokens are
produced lazily, one at a time, so the parser only ever holds the current
token and a single lookahead.

Tokens cover literals (integers, strings), keywords (``fn``, ``let``, ``if`` …),
operators and delimiters. Whitespace, newlines included, is skipped; newlines
only advance the line counter. Characters the language does not know become
``ILLEGAL`` tokens instead of failing here, so they surface as parser
diagnostics.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re
from typing import Iterator


class Token:
    """
    Represents a lexical token with a type and literal.
    """
    def __init__(self, type_, literal, line, column=0):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            literal (str): The source text of the token.
            line (int): The 1-based line the token starts on.
            column (int): The 0-based offset of the token within its line.
                Not part of token equality.
        """
        self.type = type_
        self.literal = literal
        self.line = line
        self.column = column

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.literal!r}, line={self.line})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.literal, self.line) == (other.type, other.literal, other.line)


KEYWORDS: dict[str, str] = {
    'fn': 'FUNCTION',
    'let': 'LET',
    'true': 'TRUE',
    'false': 'FALSE',
    'if': 'IF',
    'else': 'ELSE',
    'return': 'RETURN',
}

TOKEN_SPECIFICATION: list[tuple[str, str]] = [
    # Literals
    ('INT',       r'[0-9]+'),
    ('STRING',    r'"[^"]*"'),
    ('UNTERMINATED', r'"[^"]*'),

    # Identifiers and keywords
    ('IDENT',     r'[A-Za-z_][A-Za-z0-9_]*'),

    # Two-character operators
    ('EQ',        r'=='),
    ('NOT_EQ',    r'!='),

    # Operators
    ('ASSIGN',    r'='),
    ('PLUS',      r'\+'),
    ('MINUS',     r'-'),
    ('BANG',      r'!'),
    ('ASTERISK',  r'\*'),
    ('SLASH',     r'/'),
    ('LT',        r'<'),
    ('GT',        r'>'),

    # Delimiters
    ('COMMA',     r','),
    ('SEMICOLON', r';'),
    ('COLON',     r':'),
    ('LPAREN',    r'\('),
    ('RPAREN',    r'\)'),
    ('LBRACE',    r'\{'),
    ('RBRACE',    r'\}'),
    ('LBRACKET',  r'\['),
    ('RBRACKET',  r'\]'),

    # Miscellaneous
    ('NEWLINE',   r'\n'),
    ('SKIP',      r'[ \t\r]+'),
    ('MISMATCH',  r'.'),
]

TOKEN_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in TOKEN_SPECIFICATION)
)


def tokenize(code: str) -> Iterator[Token]:
    """
    Lazily convert a string of source code into tokens.

    Parameters:
        code (str): The source code to tokenize.

    Yields:
        Token: The next token; the final token is always ``EOF``.
    """
    line_num = 1
    line_start = 0

    for match_obj in TOKEN_REGEX.finditer(code):
        kind = match_obj.lastgroup
        value = match_obj.group()
        column = match_obj.start() - line_start

        if kind == 'NEWLINE':
            line_num += 1
            line_start = match_obj.end()
            continue
        if kind == 'SKIP':
            continue

        if kind in ('STRING', 'UNTERMINATED'):
            literal = value[1:-1] if kind == 'STRING' else value
            yield Token('STRING' if kind == 'STRING' else 'ILLEGAL', literal, line_num, column)
            # Strings may span lines.
            if '\n' in value:
                line_num += value.count('\n')
                line_start = match_obj.start() + value.rindex('\n') + 1
        elif kind == 'IDENT':
            yield Token(KEYWORDS.get(value, 'IDENT'), value, line_num, column)
        elif kind == 'MISMATCH':
            yield Token('ILLEGAL', value, line_num, column)
        else:
            yield Token(kind, value, line_num, column)

    yield Token('EOF', '', line_num, len(code) - line_start)
