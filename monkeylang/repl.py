"""
Monkey front end.

Workflow:
1. The source is read from a script file, or line by line from the REPL.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST following the language grammar.
   Parser diagnostics are printed and the source is not evaluated.
4. The Interpreter walks the AST against one root environment, which the REPL
   keeps for the whole session, and the result is printed unless it is null.

Set ``MONKEYDEBUG`` (or pass ``--debug``) to print the tokens and the AST
before evaluation.


File: repl.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""
import argparse
import os
import sys

from monkeylang.ast_nodes import Program
from monkeylang.interpreter import Interpreter
from monkeylang.lexer import tokenize
from monkeylang.objects import NULL, Error, Object
from monkeylang.parser import Parser

PROMPT = ">> "
CONTINUATION_PROMPT = ".. "


def debug_enabled() -> bool:
    """
    Whether the ``MONKEYDEBUG`` environment switch is set.
    """
    return bool(os.environ.get('MONKEYDEBUG'))


def debug_print_tokens_ast(source: str, program: Program):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(list(tokenize(source)))
    print("\nAST:\n")
    print(program)
    print(" ")


def print_parser_errors(errors: list[str]):
    """
    Print parser diagnostics, one per line.
    """
    print("parser errors:")
    for msg in errors:
        print(f"\t{msg}")


def print_result(result: Object):
    """
    Print a result unless it is null.
    """
    if result is not NULL:
        print(result.inspect())


def run_source(interpreter: Interpreter, source: str, debug: bool = False) -> Object | None:
    """
    Parse and evaluate source with an interpreter, printing diagnostics
    instead of evaluating when the parse fails.

    Returns:
        Object | None: The result, or None if the source did not parse.
    """
    parser = Parser(tokenize(source), interpreter.file)
    program, errors = parser.parse_program()
    if errors:
        print_parser_errors(errors)
        return None
    if debug:
        debug_print_tokens_ast(source, program)
    return interpreter.evaluate(program)


def run_script(script_name: str, debug: bool = False) -> int:
    """
    Run a Monkey script.

    Returns:
        int: Exit status; 1 if the script failed to parse or evaluated to an error.
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"{type(e).__name__}: {e}")
        return 1

    interpreter = Interpreter(script_name)
    result = run_source(interpreter, code, debug)
    if result is None:
        return 1
    print_result(result)
    return 1 if isinstance(result, Error) else 0


def _is_incomplete(errors: list[str]) -> bool:
    """
    Input that ran out mid-construct reports EOF; the REPL keeps reading.
    """
    return any("got EOF instead" in msg for msg in errors)


def run_repl(debug: bool = False):
    """
    Run the interactive REPL
    """
    print("Monkey Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    interpreter = Interpreter("<stdin>")
    buffer: list[str] = []
    while True:
        try:
            prompt = PROMPT if not buffer else CONTINUATION_PROMPT
            line = input(prompt)
            if not buffer and line.strip() in {"exit", "quit"}:
                break
            buffer.append(line)
            source = "\n".join(buffer)

            parser = Parser(tokenize(source), interpreter.file)
            program, errors = parser.parse_program()
            if errors and _is_incomplete(errors) and line.strip():
                continue
            buffer.clear()
            if errors:
                print_parser_errors(errors)
                continue
            if debug:
                debug_print_tokens_ast(source, program)
            print_result(interpreter.evaluate(program))
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def build_arg_parser() -> argparse.ArgumentParser:
    """
    Command line options.
    """
    arg_parser = argparse.ArgumentParser(
        prog="monkey",
        description="Monkey Language Interpreter. Run with no script to enter the REPL.",
    )
    arg_parser.add_argument(
        "script",
        nargs="?",
        help="Path to a Monkey source file to execute.",
    )
    arg_parser.add_argument(
        "--debug",
        action="store_true",
        default=debug_enabled(),
        help="Print tokens and AST before evaluating (also enabled by MONKEYDEBUG).",
    )
    arg_parser.add_argument(
        "--recursion-limit",
        type=int,
        default=None,
        metavar="N",
        help="Raise the host recursion limit for deeply recursive programs.",
    )
    return arg_parser


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No script: enter the REPL.
    - A script path: run it and print its final non-null value.
    """
    args = build_arg_parser().parse_args(argv)
    if args.recursion_limit is not None:
        sys.setrecursionlimit(args.recursion_limit)
    if args.script is None:
        run_repl(args.debug)
        return 0
    return run_script(args.script, args.debug)


if __name__ == "__main__":
    sys.exit(main())
