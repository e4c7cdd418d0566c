# Core type aliases for minischeme's data model.
# Runtime values are a closed set of kinds: int (numbers), bool (#t/#f),
# Symbol (unresolved identifiers), Builtin (built-in operations), Pair,
# Nil (the empty list) and Closure. Code and data share the same
# representation, so the reader's output is fed straight to the evaluator.
#
# Naming guidance:
# - Term:        any datum, either read from source or produced by evaluation.
# - EvaluatorFn: the evaluator callable threaded through special forms.

from typing import Any, Callable

# Runtime value alias
Term = Any

# Evaluator function type: passed to special forms so they can recurse
EvaluatorFn = Callable[..., Term]

__version__ = "0.1.0"
