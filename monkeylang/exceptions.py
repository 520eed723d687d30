"""Errors.

Language level failures (type mismatches, unknown identifiers, bad builtin
calls) are Error values produced by the interpreter, never exceptions. The
exceptions below are for the host embedding the interpreter.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class MonkeyParseException(Exception):
    """
    Error for source that produced parser diagnostics.
    """
    def __init__(self, diagnostics, file=None):
        self.diagnostics = list(diagnostics)
        self.file = file
        message = f"{len(self.diagnostics)} parse error(s)"
        if file is not None:
            message += f" in {file}"
        if self.diagnostics:
            message += ": " + "; ".join(self.diagnostics)
        super().__init__(message)


class UnknownNodeException(Exception):
    """
    Error for objects handed to the interpreter that are not AST nodes.
    """
    def __init__(self, node):
        self.node = node
        super().__init__(f"Unknown node type '{type(node).__name__}'")
