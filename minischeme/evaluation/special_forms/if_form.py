from minischeme import EvaluatorFn, Term
from minischeme.errors import SchemeRuntimeError, SchemeSyntaxError
from minischeme.types.environment import Environment
from minischeme.types.nil import Nil


def if_form(
    tail: list[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    """
    (if condition then-expr [else-expr])
    The condition must be a boolean; there is no general truthiness.
    """
    if len(tail) not in (2, 3):
        raise SchemeSyntaxError("if expects two or three arguments")

    cond = evaluate_fn(tail[0], env)
    if not isinstance(cond, bool):
        raise SchemeRuntimeError("condition is not boolean")

    if cond:
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
