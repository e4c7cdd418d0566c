"""Textual rendering of terms.

    ()            empty list (also the value of define, set! and a false
                  if without an else branch)
    42, -7        numbers
    #t, #f        booleans
    car, foo      builtins and symbols, by name
    (1 2 3)       proper lists
    (1 2 . 3)     improper lists, ' . ' before the final tail
    #<procedure f>  closures
"""

from __future__ import annotations

from io import StringIO

from minischeme import Term
from minischeme.errors import SchemeRuntimeError
from minischeme.types.builtin import Builtin
from minischeme.types.closure import Closure
from minischeme.types.nil import Nil, NilType
from minischeme.types.pair import Pair
from minischeme.types.symbol import Symbol


def render(term: Term) -> str:
    """Render `term` back to source-like text."""
    with StringIO() as buffer:
        _write(term, buffer)
        return buffer.getvalue()


def _write(term: Term, buffer: StringIO) -> None:
    match term:
        case NilType():
            buffer.write("()")
        case bool():
            buffer.write("#t" if term else "#f")
        case int():
            buffer.write(str(term))
        case Symbol(name=name):
            buffer.write(name)
        case Builtin():
            buffer.write(term.scheme_name)
        case Closure():
            buffer.write(str(term))
        case Pair():
            _write_list(term, buffer)
        case _:
            raise SchemeRuntimeError(f"Unknown object type: {term!r}")


def _write_list(pair: Pair, buffer: StringIO) -> None:
    buffer.write("(")
    _write(pair.first, buffer)
    node = pair.second
    # Walk the spine iteratively; only nested elements recurse
    while isinstance(node, Pair):
        buffer.write(" ")
        _write(node.first, buffer)
        node = node.second
    if node is not Nil:
        buffer.write(" . ")
        _write(node, buffer)
    buffer.write(")")
