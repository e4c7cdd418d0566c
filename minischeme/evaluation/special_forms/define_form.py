from minischeme import EvaluatorFn, Term
from minischeme.errors import SchemeNameError, SchemeRuntimeError, SchemeSyntaxError
from minischeme.evaluation.special_forms.lambda_form import parse_params
from minischeme.types.builtin import Builtin
from minischeme.types.closure import Closure
from minischeme.types.environment import Environment
from minischeme.types.nil import Nil
from minischeme.types.pair import Pair
from minischeme.types.symbol import Symbol


def _name_of(term: Term) -> str | None:
    match term:
        case Symbol(name=name):
            return name
        case Builtin():
            return term.scheme_name
        case Closure(name=name) if name:
            return name
    return None


def define_form(
    tail: list[Term],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Term:
    """
    (define name expr)
    (define (name params...) body...)
    Binds in the current scope only and produces the empty list.
    """
    if len(tail) < 2:
        raise SchemeSyntaxError("define expects a name and a body")

    target, *body = tail
    match target:
        case Symbol() | Builtin():
            if len(body) != 1:
                raise SchemeSyntaxError("define expects exactly one value expression")
            name = _name_of(target)
            value = evaluate_fn(body[0], env)
            if name in env and _name_of(value) == name:
                raise SchemeNameError("Cannot assign to itself")
            env.define(name, value)

        case Pair(first=head, second=params):
            if not isinstance(head, (Symbol, Builtin)):
                raise SchemeRuntimeError("In define: procedure name is not a symbol")
            name = _name_of(head)
            env.define(name, Closure(parse_params(params), body, env, name))

        case _:
            raise SchemeSyntaxError("define expects a symbol or a list")

    return Nil
