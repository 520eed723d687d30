"""
Monkey Language Interpreter

This is the main entry point for the Monkey language interpreter.

Usage:
    python monkey.py [script] [--debug] [--recursion-limit N]

Run with no arguments to enter interactive mode (REPL).
"""
import sys

from monkeylang.repl import main


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
