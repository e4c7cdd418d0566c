"""Cons cells and helpers for walking pair chains."""

from __future__ import annotations

from typing import Iterable

from minischeme import Term
from minischeme.errors import SchemeRuntimeError
from minischeme.types.nil import Nil


class Pair:
    """A mutable cons cell. Identity matters: aliases see in-place mutation."""

    __slots__ = ("first", "second")

    def __init__(self, first: Term, second: Term = Nil):
        self.first: Term = first
        self.second: Term = second

    def __repr__(self) -> str:
        return f"Pair({self.first!r}, {self.second!r})"


def is_number(term: Term) -> bool:
    # bool is an int subclass; #t and #f are not numbers
    return isinstance(term, int) and not isinstance(term, bool)


def is_boolean(term: Term) -> bool:
    return isinstance(term, bool)


def is_proper_list(term: Term) -> bool:
    while isinstance(term, Pair):
        term = term.second
    return term is Nil


def from_list(items: Iterable[Term], tail: Term = Nil) -> Term:
    """Build a pair chain from `items`, terminated by `tail`."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def to_list(term: Term) -> list[Term]:
    """Flatten a proper list into a Python list."""
    items: list[Term] = []
    while isinstance(term, Pair):
        items.append(term.first)
        term = term.second
    if term is not Nil:
        raise SchemeRuntimeError("Invalid arguments")
    return items
