"""Built-in procedures for the minischeme runtime.

This module defines the integer arithmetic, comparison, predicate and list
primitives. Every procedure receives its arguments already evaluated
(left-to-right, in the caller's environment) and returns a term. The
`PROCEDURES` table maps each procedure Builtin to its handler.
"""
from __future__ import annotations

from typing import Callable

from minischeme import Term
from minischeme.errors import SchemeArityError, SchemeRuntimeError, SchemeTypeError
from minischeme.types.builtin import Builtin
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair, from_list, is_boolean, is_number, is_proper_list
from minischeme.types.symbol import Symbol

Procedure = Callable[[list[Term]], Term]


# -------------------------------
# Argument checks
# -------------------------------
def _exactly(name: str, args: list[Term], count: int) -> None:
    if len(args) != count:
        noun = "argument" if count == 1 else "arguments"
        raise SchemeArityError(f"{name} expects exactly {count} {noun}, got {len(args)}")


def _at_least(name: str, args: list[Term], count: int) -> None:
    if len(args) < count:
        noun = "argument" if count == 1 else "arguments"
        raise SchemeArityError(f"{name} expects at least {count} {noun}, got {len(args)}")


def _numbers(name: str, args: list[Term]) -> list[int]:
    for arg in args:
        if not is_number(arg):
            raise SchemeTypeError(f"{name} expects numbers, got {_describe(arg)}")
    return args


def _describe(term: Term) -> str:
    # Imported lazily: the printer is a presentation layer above the runtime
    from minischeme.printer import render
    return render(term)


# -------------------------------
# Arithmetic
# -------------------------------
def _truncating_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero, as fixed-width integers do."""
    if divisor == 0:
        raise SchemeRuntimeError("Division by zero")
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend >= 0) == (divisor > 0) else -quotient


def add(args: list[Term]) -> Term:
    """Sum of all arguments; (+) is 0."""
    return sum(_numbers("+", args))


def sub(args: list[Term]) -> Term:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _at_least("-", args, 1)
    first, *rest = _numbers("-", args)
    if not rest:
        return -first
    for x in rest:
        first -= x
    return first


def mul(args: list[Term]) -> Term:
    """Product of all arguments; (*) is 1."""
    result = 1
    for x in _numbers("*", args):
        result *= x
    return result


def div(args: list[Term]) -> Term:
    """Divide left-to-right, truncating; one argument gives the integer reciprocal."""
    _at_least("/", args, 1)
    first, *rest = _numbers("/", args)
    if not rest:
        return _truncating_div(1, first)
    for x in rest:
        first = _truncating_div(first, x)
    return first


def maximum(args: list[Term]) -> Term:
    _at_least("max", args, 1)
    return max(_numbers("max", args))


def minimum(args: list[Term]) -> Term:
    _at_least("min", args, 1)
    return min(_numbers("min", args))


def absolute(args: list[Term]) -> Term:
    _exactly("abs", args, 1)
    return abs(_numbers("abs", args)[0])


# -------------------------------
# Comparison
# -------------------------------
def _chain(name: str, holds: Callable[[int, int], bool]) -> Procedure:
    def compare(args: list[Term]) -> Term:
        nums = _numbers(name, args)
        return all(holds(a, b) for a, b in zip(nums, nums[1:]))
    compare.__name__ = f"compare_{name}"
    compare.__doc__ = f"Chainable {name}: #t if it holds for every adjacent pair of arguments."
    return compare


eq = _chain("=", lambda a, b: a == b)
lt = _chain("<", lambda a, b: a < b)
lte = _chain("<=", lambda a, b: a <= b)
gt = _chain(">", lambda a, b: a > b)
gte = _chain(">=", lambda a, b: a >= b)


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test: Callable[[Term], bool]) -> Procedure:
    def predicate(args: list[Term]) -> Term:
        _exactly(name, args, 1)
        return test(args[0])
    predicate.__name__ = name.rstrip("?").replace("-", "_") + "_p"
    return predicate


is_number_p = _predicate("number?", is_number)
is_boolean_p = _predicate("boolean?", is_boolean)
is_pair_p = _predicate("pair?", lambda x: isinstance(x, Pair))
is_null_p = _predicate("null?", lambda x: x is Nil)
is_list_p = _predicate("list?", is_proper_list)
is_symbol_p = _predicate("symbol?", lambda x: isinstance(x, (Symbol, Builtin)))
# Only #f is false; (not 0) and (not '()) are #f
logical_not = _predicate("not", lambda x: x is False)


# -------------------------------
# List operations
# -------------------------------
def cons(args: list[Term]) -> Term:
    _exactly("cons", args, 2)
    return Pair(args[0], args[1])


def car(args: list[Term]) -> Term:
    _exactly("car", args, 1)
    if not isinstance(args[0], Pair):
        raise SchemeTypeError("car expects a pair")
    return args[0].first


def cdr(args: list[Term]) -> Term:
    _exactly("cdr", args, 1)
    if not isinstance(args[0], Pair):
        raise SchemeTypeError("cdr expects a pair")
    return args[0].second


def list_builtin(args: list[Term]) -> Term:
    return from_list(args)


def _walk(name: str, args: list[Term]) -> Term:
    """Follow `index` cdr links from the list argument of list-ref/list-tail."""
    _exactly(name, args, 2)
    node, index = args
    if not is_number(index):
        raise SchemeTypeError(f"{name} expects a number as the second argument")
    if index < 0:
        raise SchemeRuntimeError(f"{name} index must be non-negative")
    for _ in range(index):
        if not isinstance(node, Pair):
            raise SchemeRuntimeError(f"{name} index out of bounds")
        node = node.second
    return node


def list_ref(args: list[Term]) -> Term:
    node = _walk("list-ref", args)
    if not isinstance(node, Pair):
        raise SchemeRuntimeError("list-ref index out of bounds")
    return node.first


def list_tail(args: list[Term]) -> Term:
    return _walk("list-tail", args)


# -------------------------------
# Registration
# -------------------------------
PROCEDURES: dict[Builtin, Procedure] = {
    Builtin.NUMBER_P: is_number_p,
    Builtin.EQ: eq,
    Builtin.GT: gt,
    Builtin.LT: lt,
    Builtin.GE: gte,
    Builtin.LE: lte,
    Builtin.ADD: add,
    Builtin.SUB: sub,
    Builtin.MUL: mul,
    Builtin.DIV: div,
    Builtin.MAX: maximum,
    Builtin.MIN: minimum,
    Builtin.ABS: absolute,
    Builtin.BOOLEAN_P: is_boolean_p,
    Builtin.NOT: logical_not,
    Builtin.PAIR_P: is_pair_p,
    Builtin.NULL_P: is_null_p,
    Builtin.LIST_P: is_list_p,
    Builtin.CONS: cons,
    Builtin.CAR: car,
    Builtin.CDR: cdr,
    Builtin.LIST: list_builtin,
    Builtin.LIST_REF: list_ref,
    Builtin.LIST_TAIL: list_tail,
    Builtin.SYMBOL_P: is_symbol_p,
}
