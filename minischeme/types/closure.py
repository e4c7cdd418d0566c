"""User-defined procedures created by lambda and define."""

from __future__ import annotations

from io import StringIO

from minischeme import Term
from minischeme.types.environment import Environment


class Closure:
    """A procedure value: parameter names, body terms and the captured scope."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: list[str],
        body: list[Term],
        env: Environment,
        name: str = "",
    ):
        self.params: tuple[str, ...] = tuple(params)
        self.body: tuple[Term, ...] = tuple(body)
        # Captured by reference: later defines in `env` are visible to the body
        self.env: Environment = env
        self.name: str = name

    @property
    def arity(self) -> int:
        return len(self.params)

    def extend_env(self, args: list[Term]) -> Environment:
        """Return a fresh scope, parented at the captured one, binding `args`."""
        local_env = Environment(outer=self.env)
        local_env.update(dict(zip(self.params, args)))
        return local_env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<procedure")
            if self.name:
                buffer.write(" ")
                buffer.write(self.name)
            buffer.write(">")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Closure({self.name or 'lambda'}, params={list(self.params)})"
