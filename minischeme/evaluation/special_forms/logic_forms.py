from minischeme import EvaluatorFn, Term
from minischeme.types.environment import Environment


def and_form(tail: list[Term], env: Environment, evaluate_fn: EvaluatorFn) -> Term:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right until #f is found,
    which is returned immediately; the remaining operands are never
    evaluated. Otherwise returns the value of the last operand. With zero
    operands, returns #t.
    """
    result: Term = True
    for expr in tail:
        result = evaluate_fn(expr, env)
        if result is False:
            return result
    return result


def or_form(tail: list[Term], env: Environment, evaluate_fn: EvaluatorFn) -> Term:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns the first
    value that is not #f. If every operand is #f, or there are none, returns #f.
    """
    for expr in tail:
        val = evaluate_fn(expr, env)
        if val is not False:
            return val
    return False
