"""Core evaluator for the minischeme interpreter.

A plain recursive tree walker: literals evaluate to themselves, identifiers
are looked up in the environment chain, and a pair is an application whose
operator must reduce to a builtin or a closure.
"""

from __future__ import annotations

from minischeme import Term
from minischeme.errors import SchemeNameError, SchemeRuntimeError
from minischeme.evaluation.apply import apply
from minischeme.types.builtin import Builtin
from minischeme.types.closure import Closure
from minischeme.types.environment import Environment
from minischeme.types.nil import NilType
from minischeme.types.pair import Pair, to_list
from minischeme.types.symbol import Symbol


def evaluate(term: Term, env: Environment) -> Term:
    """Evaluate `term` in `env` and return the resulting term."""
    match term:
        case NilType():
            raise SchemeRuntimeError("Cannot evaluate empty list")

        case bool() | int() | Closure():
            return term

        case Symbol(name=name):
            value = env.get(name)
            if value is None:
                raise SchemeNameError(f"Variable {name} is undefined")
            return value

        case Builtin():
            # A builtin name may have been shadowed by define
            value = env.get(term.scheme_name)
            return term if value is None else value

        case Pair(first=op, second=args):
            head = evaluate(op, env)
            if not isinstance(head, (Builtin, Closure)):
                raise SchemeRuntimeError("First element is not a function")
            return apply(head, to_list(args), env, evaluate)

    raise SchemeRuntimeError(f"Unknown expression type: {term!r}")
