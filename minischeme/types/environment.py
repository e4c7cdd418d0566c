"""Runtime environment for minischeme.

An Environment stores bindings of names to evaluated terms and supports
nested scopes via an `outer` link. The global environment lives for the
whole interpreter session; each closure call gets a fresh child scope of
the closure's captured environment.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from minischeme import Term
from minischeme.errors import SchemeNameError


class Environment:
    """Hierarchical mapping from names to terms."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, Term] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: Term) -> None:
        """Bind `name` in this scope, shadowing any outer binding."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: str, value: Term) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises SchemeNameError if no scope binds it; set never creates a binding.
        """
        env = self.find(name)
        if env is None:
            raise SchemeNameError(f"Variable {name} is undefined")
        env.vars[name] = value

    def get(self, name: str) -> Optional[Term]:
        """Value bound to `name`, or None when nothing in the chain binds it."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def update(self, mapping: Mapping[str, Term]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            env: Optional[Environment] = self
            while env is not None:
                with StringIO() as frame:
                    env._write_vars(frame)
                    chain.append(frame.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
