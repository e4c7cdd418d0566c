"""The closed table of built-in operations known to the reader.

Each member carries its source name and whether it is a special form
(receives its argument terms unevaluated) or a procedure (receives the
values of its arguments, evaluated left-to-right in the caller's scope).
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Builtin(Enum):
    # Special forms
    QUOTE = ("quote", True)
    IF = ("if", True)
    DEFINE = ("define", True)
    SET = ("set!", True)
    LAMBDA = ("lambda", True)
    AND = ("and", True)
    OR = ("or", True)
    SET_CAR = ("set-car!", True)
    SET_CDR = ("set-cdr!", True)

    # Numbers
    NUMBER_P = ("number?", False)
    EQ = ("=", False)
    GT = (">", False)
    LT = ("<", False)
    GE = (">=", False)
    LE = ("<=", False)
    ADD = ("+", False)
    SUB = ("-", False)
    MUL = ("*", False)
    DIV = ("/", False)
    MAX = ("max", False)
    MIN = ("min", False)
    ABS = ("abs", False)

    # Booleans
    BOOLEAN_P = ("boolean?", False)
    NOT = ("not", False)

    # Lists
    PAIR_P = ("pair?", False)
    NULL_P = ("null?", False)
    LIST_P = ("list?", False)
    CONS = ("cons", False)
    CAR = ("car", False)
    CDR = ("cdr", False)
    LIST = ("list", False)
    LIST_REF = ("list-ref", False)
    LIST_TAIL = ("list-tail", False)

    # Symbols
    SYMBOL_P = ("symbol?", False)

    def __init__(self, scheme_name: str, special: bool):
        self.scheme_name = scheme_name
        self.is_special_form = special

    @classmethod
    def lookup(cls, name: str) -> Optional[Builtin]:
        return _BY_NAME.get(name)

    def __str__(self) -> str:
        return self.scheme_name


_BY_NAME: dict[str, Builtin] = {b.scheme_name: b for b in Builtin}
