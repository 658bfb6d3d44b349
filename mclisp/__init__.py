# Core type aliases for the mclisp data model.
# Programs and values share one representation: the Expression tree defined in
# mclisp.types.expression (an Atom or a List of Expressions).
#
# Naming guidance:
# - SExpression: Use in reader/printer code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to the same tree type; the split only documents intent.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias, interchangeable with LispValue
SExpression = LispValue

# Evaluator function type handed to special forms: evaluate_fn(env, expr)
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
