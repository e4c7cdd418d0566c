from minischeme import EvaluatorFn, Term
from minischeme.errors import SchemeSyntaxError
from minischeme.types.environment import Environment


def quote_form(
    tail: list[Term], env: Environment, evaluate_fn: EvaluatorFn
) -> Term:
    if len(tail) != 1:
        raise SchemeSyntaxError("quote takes exactly one argument")
    return tail[0]
