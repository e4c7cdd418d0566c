from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, TextIO, Union

from minischeme import Term
from minischeme.config import get_recursion_limit
from minischeme.errors import SchemeRecursionError, SchemeSyntaxError
from minischeme.evaluation.evaluator import evaluate
from minischeme.printer import render
from minischeme.reader.parser import read, read_all
from minischeme.reader.tokenizer import Tokenizer
from minischeme.types.environment import Environment

logger = logging.getLogger(__name__)

Source = Union[str, TextIO]


@contextmanager
def _stack_guard() -> Iterator[None]:
    """Turn host stack exhaustion into a SchemeRecursionError."""
    try:
        yield
    except RecursionError as ex:
        logger.warning("Evaluation exceeded the maximum recursion depth (%d)", sys.getrecursionlimit())
        raise SchemeRecursionError("Maximum recursion depth exceeded") from ex


class Interpreter:
    """
    Reads and evaluates minischeme code against one global environment.
    Definitions persist across calls for the lifetime of the instance.
    """

    def __init__(self, prelude: Source | None = None):
        limit = get_recursion_limit()
        if limit > sys.getrecursionlimit():
            logger.debug("Raising recursion limit to %d", limit)
            sys.setrecursionlimit(limit)

        self.env: Environment = Environment()

        if prelude is not None:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: Source) -> None:
        """Evaluate every expression of `code`, discarding the results."""
        for _ in self.run_all(code):
            pass

    def evaluate(self, code: Source) -> Term:
        """Read exactly one expression from `code` and evaluate it."""
        logger.debug("evaluate: %r", code)
        tokenizer = Tokenizer(code)
        with _stack_guard():
            term = read(tokenizer)
            if not tokenizer.at_end():
                raise SchemeSyntaxError("Unexpected input after the first expression")
            return evaluate(term, self.env)

    def run(self, code: Source) -> str:
        """Evaluate exactly one expression and render the result.

        Anything after the first expression is rejected with a
        SchemeSyntaxError rather than silently ignored; use `run_all` for
        sources holding several expressions.
        """
        result = self.evaluate(code)
        with _stack_guard():
            return render(result)

    def iter_all(self, code: Source) -> Iterator[str]:
        """Lazily evaluate the top-level expressions of `code`, yielding each rendered result."""
        logger.debug("iter_all: %r", code)
        tokenizer = Tokenizer(code)
        with _stack_guard():
            for term in read_all(tokenizer):
                yield render(evaluate(term, self.env))

    def run_all(self, code: Source) -> list[str]:
        """Evaluate every top-level expression in order; render each result."""
        return list(self.iter_all(code))

    def print(self, term: Term) -> str:
        """Render a term the way `run` does."""
        with _stack_guard():
            return render(term)
