from minischeme import EvaluatorFn, Term
from minischeme.errors import SchemeRuntimeError, SchemeSyntaxError
from minischeme.types.closure import Closure
from minischeme.types.environment import Environment
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair
from minischeme.types.symbol import Symbol


def parse_params(params: Term) -> list[str]:
    """Names of a parameter list; each entry must be a plain identifier."""
    names: list[str] = []
    while isinstance(params, Pair):
        param = params.first
        # Builtin keywords read as Builtin, never as Symbol
        if not isinstance(param, Symbol):
            raise SchemeRuntimeError(f"In lambda: {param} is not a variable")
        names.append(param.name)
        params = params.second
    if params is not Nil:
        raise SchemeSyntaxError("lambda parameters must be a proper list")
    return names


def lambda_form(
    tail: list[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    # (lambda (params...) body...) needs at least one body form; several
    # body forms are evaluated in order and the last value is returned.
    if len(tail) < 2:
        raise SchemeSyntaxError("lambda expects a parameter list and a body")

    params = parse_params(tail[0])
    return Closure(params, tail[1:], env)
