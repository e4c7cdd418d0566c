from minischeme import EvaluatorFn, Term
from minischeme.errors import SchemeRuntimeError, SchemeSyntaxError, SchemeTypeError
from minischeme.types.environment import Environment
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair
from minischeme.types.symbol import Symbol


def set_form(
    tail: list[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    if len(tail) != 2:
        raise SchemeSyntaxError("set! expects exactly two arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise SchemeRuntimeError(f"set! target {var_sym} is not a variable")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym.name, value)
    return Nil


def _mutated_pair(
    form: str, tail: list[Term], env: Environment, evaluate_fn: EvaluatorFn
) -> tuple[Pair, Term]:
    if len(tail) != 2:
        raise SchemeRuntimeError(f"{form} expects exactly two arguments")
    pair = evaluate_fn(tail[0], env)
    value = evaluate_fn(tail[1], env)
    if value is Nil:
        raise SchemeRuntimeError(f"{form} cannot store the empty list")
    if not isinstance(pair, Pair):
        raise SchemeTypeError(f"{form} expects a pair")
    return pair, value


def set_car_form(
    tail: list[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    """(set-car! pair value): replace the first field of the pair in place."""
    pair, value = _mutated_pair("set-car!", tail, env, evaluate_fn)
    pair.first = value
    return Nil


def set_cdr_form(
    tail: list[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    """(set-cdr! pair value): replace the second field of the pair in place."""
    pair, value = _mutated_pair("set-cdr!", tail, env, evaluate_fn)
    pair.second = value
    return Nil
