"""Interpreter.

This is a tree-walk interpreter for evaluating AST nodes produced by the parser. It supports
integer, boolean and string arithmetic, let bindings, first-class functions and closures,
conditionals, arrays, maps and builtin functions.

1. Execution Model
The interpreter evaluates an abstract syntax tree (AST) in a top-down, recursive manner.
`evaluate()` takes a node and the environment to evaluate it in, dispatches on the node
variant with `match`, and returns a runtime value. It holds no state of its own, so
independent runs only share the immutable TRUE/FALSE/NULL values and the builtin registry.

2. Environment
Names live in `Environment` scopes. A `let` binds in the current scope. A function call
evaluates its body in a fresh scope whose outer scope is the environment captured by the
function literal, never the caller's scope.

3. Expression Evaluation
Integers are signed 64-bit and wrap on overflow; division truncates toward zero. Strings
support concatenation only. Other values compare with `==` and `!=` by identity. Only
FALSE and NULL are falsy.

4. Control Flow
A `return` wraps its value in `ReturnValue`, which blocks pass upward untouched until the
nearest function call (or the program) unwraps it.

5. Error Handling
Runtime failures are `Error` values, not exceptions. Every compound evaluation checks each
sub-result and hands an Error back unchanged as soon as one appears, without evaluating
the remaining siblings. Out-of-range array indexes and missing map keys give NULL.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Sequence

from monkeylang.ast_nodes import (
    ArrayLiteral,
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    Expression,
    ExpressionStatement,
    FunctionLiteral,
    Identifier,
    IfExpression,
    IndexExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    MapLiteral,
    Node,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
    StringLiteral,
)
from monkeylang.environment import Environment, new_enclosed_environment, new_environment
from monkeylang.exceptions import MonkeyParseException, UnknownNodeException
from monkeylang.lexer import tokenize
from monkeylang.natives import BUILTINS
from monkeylang.objects import (
    FALSE,
    NULL,
    TRUE,
    Array,
    Builtin,
    Error,
    Function,
    Hash,
    Hashable,
    HashPair,
    Integer,
    Object,
    ReturnValue,
    String,
    is_error,
    native_bool_to_boolean,
)
from monkeylang.operations import Op
from monkeylang.parser import Parser


def _wrap_int64(value: int) -> int:
    """
    Reduce a Python int to the signed 64-bit range, two's complement style.
    """
    return ((value + 2 ** 63) % 2 ** 64) - 2 ** 63


def is_truthy(obj: Object) -> bool:
    """
    Only FALSE and NULL are falsy; every other value, zero included, is truthy.
    """
    return obj is not FALSE and obj is not NULL


def evaluate(node: Node, env: Environment) -> Object:
    """
    Evaluate an AST node and return its computed value.

    Parameters:
        node (Node): Any node produced by the parser.
        env (Environment): The scope to evaluate in.

    Returns:
        Object: The resulting value. Failures come back as Error values.

    Raises:
        UnknownNodeException: If ``node`` is not an AST node.
    """
    match node:
        # Statements
        case Program(statements=statements):
            return _eval_program(statements, env)
        case BlockStatement(statements=statements):
            return _eval_block(statements, env)
        case ExpressionStatement(expression=expression):
            return evaluate(expression, env)
        case ReturnStatement(return_value=return_value):
            value = evaluate(return_value, env)
            if is_error(value):
                return value
            return ReturnValue(value)
        case LetStatement(name=name, value=value_node):
            value = evaluate(value_node, env)
            if is_error(value):
                return value
            env.set(name.value, value)
            return NULL

        # Literals
        case IntegerLiteral(value=value):
            return Integer(value)
        case StringLiteral(value=value):
            return String(value)
        case BooleanLiteral(value=value):
            return native_bool_to_boolean(value)
        case ArrayLiteral(elements=elements):
            values = _eval_expressions(elements, env)
            if len(values) == 1 and is_error(values[0]):
                return values[0]
            return Array(tuple(values))
        case MapLiteral(pairs=pairs):
            return _eval_map_literal(pairs, env)
        case FunctionLiteral(parameters=parameters, body=body):
            return Function(parameters, body, env)

        # Names
        case Identifier(value=name):
            return _eval_identifier(name, env)

        # Operators
        case PrefixExpression(operator=operator, right=right_node):
            right = evaluate(right_node, env)
            if is_error(right):
                return right
            return _eval_prefix(operator, right)
        case InfixExpression(left=left_node, operator=operator, right=right_node):
            left = evaluate(left_node, env)
            if is_error(left):
                return left
            right = evaluate(right_node, env)
            if is_error(right):
                return right
            return _eval_infix(operator, left, right)

        # Control flow
        case IfExpression(condition=condition_node, consequence=consequence, alternative=alternative):
            condition = evaluate(condition_node, env)
            if is_error(condition):
                return condition
            if is_truthy(condition):
                return evaluate(consequence, env)
            if alternative is not None:
                return evaluate(alternative, env)
            return NULL

        # Calls and indexing
        case CallExpression(function=function_node, arguments=arguments):
            function = evaluate(function_node, env)
            if is_error(function):
                return function
            args = _eval_expressions(arguments, env)
            if len(args) == 1 and is_error(args[0]):
                return args[0]
            return apply_function(function, args)
        case IndexExpression(left=left_node, index=index_node):
            left = evaluate(left_node, env)
            if is_error(left):
                return left
            index = evaluate(index_node, env)
            if is_error(index):
                return index
            return _eval_index(left, index)

        case _:
            raise UnknownNodeException(node)


def _eval_program(statements: Sequence[Statement], env: Environment) -> Object:
    result: Object = NULL
    for stmt in statements:
        result = evaluate(stmt, env)
        if isinstance(result, ReturnValue):
            return result.value
        if is_error(result):
            return result
    return result


def _eval_block(statements: Sequence[Statement], env: Environment) -> Object:
    """
    Like a program, but a ReturnValue is passed up still wrapped so the
    enclosing call can see it.
    """
    result: Object = NULL
    for stmt in statements:
        result = evaluate(stmt, env)
        if isinstance(result, (ReturnValue, Error)):
            return result
    return result


def _eval_expressions(nodes: Sequence[Expression], env: Environment) -> list[Object]:
    """
    Evaluate left to right. On the first Error, return a list holding only
    that Error.
    """
    values = []
    for node in nodes:
        value = evaluate(node, env)
        if is_error(value):
            return [value]
        values.append(value)
    return values


def _eval_identifier(name: str, env: Environment) -> Object:
    value, found = env.get(name)
    if found:
        return value
    builtin = BUILTINS.get(name)
    if builtin is not None:
        return builtin
    return Error(f"identifier not found: {name}")


def _eval_prefix(operator: Op, right: Object) -> Object:
    match operator:
        case Op.NOT:
            return native_bool_to_boolean(not is_truthy(right))
        case Op.SUB:
            if not isinstance(right, Integer):
                return Error(f"unknown operator: -{right.type()}")
            return Integer(_wrap_int64(-right.value))
        case _:
            return Error(f"unknown operator: {operator}{right.type()}")


def _eval_infix(operator: Op, left: Object, right: Object) -> Object:
    if isinstance(left, Integer) and isinstance(right, Integer):
        return _eval_integer_infix(operator, left.value, right.value)
    if left.type() != right.type():
        return Error(f"type mismatch: {left.type()} {operator} {right.type()}")
    if isinstance(left, String) and isinstance(right, String):
        if operator == Op.ADD:
            return String(left.value + right.value)
        return Error(f"unknown operator: {left.type()} {operator} {right.type()}")
    if operator == Op.EQ:
        return native_bool_to_boolean(left is right)
    if operator == Op.NE:
        return native_bool_to_boolean(left is not right)
    return Error(f"unknown operator: {left.type()} {operator} {right.type()}")


def _eval_integer_infix(operator: Op, lhs: int, rhs: int) -> Object:
    match operator:
        case Op.ADD:
            return Integer(_wrap_int64(lhs + rhs))
        case Op.SUB:
            return Integer(_wrap_int64(lhs - rhs))
        case Op.MUL:
            return Integer(_wrap_int64(lhs * rhs))
        case Op.DIV:
            if rhs == 0:
                return Error("division by zero")
            quotient = abs(lhs) // abs(rhs)
            if (lhs < 0) != (rhs < 0):
                quotient = -quotient
            return Integer(_wrap_int64(quotient))
        case Op.LT:
            return native_bool_to_boolean(lhs < rhs)
        case Op.GT:
            return native_bool_to_boolean(lhs > rhs)
        case Op.EQ:
            return native_bool_to_boolean(lhs == rhs)
        case Op.NE:
            return native_bool_to_boolean(lhs != rhs)
        case _:
            return Error(f"unknown operator: INTEGER {operator} INTEGER")


def _eval_map_literal(pairs, env: Environment) -> Object:
    entries: dict = {}
    for key_node, value_node in pairs:
        key = evaluate(key_node, env)
        if is_error(key):
            return key
        if not isinstance(key, Hashable):
            return Error(f"unusable as hash key: {key.type()}")
        value = evaluate(value_node, env)
        if is_error(value):
            return value
        entries[key.hash_key()] = HashPair(key, value)
    return Hash(entries)


def _eval_index(left: Object, index: Object) -> Object:
    if isinstance(left, Array) and isinstance(index, Integer):
        if 0 <= index.value < len(left.elements):
            return left.elements[index.value]
        return NULL
    if isinstance(left, Hash):
        if not isinstance(index, Hashable):
            return Error(f"unusable as hash key: {index.type()}")
        pair = left.pairs.get(index.hash_key())
        return pair.value if pair is not None else NULL
    return Error(f"index operator not supported: {left.type()}")


def apply_function(function: Object, args: Sequence[Object]) -> Object:
    """
    Call a function or builtin with already evaluated arguments.

    A Monkey function runs in a new scope enclosed by the environment it
    captured. A ``return`` inside it unwinds only to here.
    """
    if isinstance(function, Function):
        if len(args) != len(function.parameters):
            return Error(
                f"wrong number of arguments. got={len(args)}, want={len(function.parameters)}"
            )
        call_env = new_enclosed_environment(function.env)
        for param, arg in zip(function.parameters, args):
            call_env.set(param.value, arg)
        result = evaluate(function.body, call_env)
        if isinstance(result, ReturnValue):
            return result.value
        return result
    if isinstance(function, Builtin):
        return function.fn(*args)
    return Error(f"not a function: {function.type()}")


class Interpreter:
    """Embedding helper: parses source and evaluates it in one root scope."""

    def __init__(self, file: str = "<stdin>", env: Environment | None = None):
        """Initialize the interpreter."""
        self.file = file
        self.env = env if env is not None else new_environment()

    def parse(self, source: str) -> Program:
        """
        Parse source code into a program.

        Raises:
            MonkeyParseException: If the parser reported diagnostics.
        """
        parser = Parser(tokenize(source), self.file)
        program, errors = parser.parse_program()
        if errors:
            raise MonkeyParseException(errors, self.file)
        return program

    def evaluate(self, node: Node) -> Object:
        """
        Evaluate a node in the root scope. Exhausting the host stack gives an
        Error value instead of an exception.
        """
        try:
            return evaluate(node, self.env)
        except RecursionError:
            return Error("maximum recursion depth exceeded")

    def run(self, source: str) -> Object:
        """
        Parse and evaluate source code. Bindings persist across runs.
        """
        return self.evaluate(self.parse(source))


__all__ = ["evaluate", "apply_function", "is_truthy", "Interpreter", "TRUE", "FALSE", "NULL"]
