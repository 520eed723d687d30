"""Monkey language interpreter.

The lexer, parser, interpreter and runtime values are exposed at the
package level for convenience.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from monkeylang.environment import Environment, new_enclosed_environment, new_environment
from monkeylang.interpreter import Interpreter, evaluate
from monkeylang.lexer import Token, tokenize
from monkeylang.parser import Parser

__version__ = "0.1.0"

__all__ = [
    "Environment",
    "Interpreter",
    "Parser",
    "Token",
    "evaluate",
    "new_enclosed_environment",
    "new_environment",
    "tokenize",
]
