"""
Utility functions shared across Monkey Language tests.
"""
from pathlib import Path
import sys

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from monkeylang.ast_nodes import Program  # noqa: E402
from monkeylang.environment import new_environment  # noqa: E402
from monkeylang.interpreter import evaluate  # noqa: E402
from monkeylang.lexer import tokenize  # noqa: E402
from monkeylang.objects import Object  # noqa: E402
from monkeylang.parser import Parser  # noqa: E402


def parse_with_errors(source: str) -> tuple[Program, list[str]]:
    """
    Parse source code and return the program and its diagnostics.
    """
    parser = Parser(tokenize(source), "<test>")
    return parser.parse_program()


def parse_source(source: str) -> Program:
    """
    Parse source code that must be free of diagnostics and return the AST.
    """
    program, errors = parse_with_errors(source)
    assert errors == [], f"parser reported errors: {errors}"
    return program


def run_source(source: str) -> Object:
    """
    Parse and evaluate source code in a fresh root environment.
    """
    return evaluate(parse_source(source), new_environment())
