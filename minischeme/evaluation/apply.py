"""Application engine for minischeme.

Centralizes how an operator value is applied to the argument terms of a
call form:
- Special-form builtins receive the argument terms unevaluated.
- Procedure builtins receive the argument values, evaluated left-to-right
  in the caller's environment.
- Closures check arity, evaluate arguments in the caller's environment,
  bind them in a fresh scope parented at the captured environment and run
  the body in order, returning the last value.
"""

from __future__ import annotations

from minischeme import EvaluatorFn, Term
from minischeme.builtin.procedures import PROCEDURES
from minischeme.errors import SchemeArityError, SchemeRuntimeError
from minischeme.evaluation.special_forms import SPECIAL_FORMS
from minischeme.types.builtin import Builtin
from minischeme.types.closure import Closure
from minischeme.types.environment import Environment
from minischeme.types.nil import Nil


def apply_closure(
    fn: Closure,
    arg_terms: list[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    """Apply a user-defined procedure to unevaluated argument terms."""
    label = fn.name or "lambda"
    if len(arg_terms) < fn.arity:
        raise SchemeArityError(
            f"Insufficient arguments for {label}: expected {fn.arity}, got {len(arg_terms)}"
        )
    if len(arg_terms) > fn.arity:
        raise SchemeArityError(
            f"Too many arguments for {label}: expected {fn.arity}, got {len(arg_terms)}"
        )

    args = [evaluate_fn(arg, env) for arg in arg_terms]
    local_env = fn.extend_env(args)

    result: Term = Nil
    for expr in fn.body:
        result = evaluate_fn(expr, local_env)
    return result


def apply(
    head: Builtin | Closure,
    arg_terms: list[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    """Apply either a builtin or a closure to the argument terms of a call."""
    if isinstance(head, Closure):
        return apply_closure(head, arg_terms, env, evaluate_fn)
    if isinstance(head, Builtin):
        if head.is_special_form:
            return SPECIAL_FORMS[head](arg_terms, env, evaluate_fn)
        args = [evaluate_fn(arg, env) for arg in arg_terms]
        return PROCEDURES[head](args)
    raise SchemeRuntimeError("First element is not a function")
