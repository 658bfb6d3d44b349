"""Core evaluator for mclisp.

A pure recursive-descent walk over the expression tree:

- an Atom evaluates to its binding in the environment;
- the empty list has nothing to call and fails;
- a List headed by a special-form symbol is handed to that form's handler;
- any other List is a function application (see mclisp.evaluation.apply).

Failures are raised as McLispError subclasses and propagate unchanged; there is
no local recovery anywhere in the walk.
"""

from __future__ import annotations

import logging

from mclisp import SExpression, LispValue
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispNoProcedure, McLispUnboundSymbol
from mclisp.types.expression import Atom, List
from mclisp.evaluation.apply import apply
from mclisp.evaluation.special_forms import SPECIAL_FORMS

_logger = logging.getLogger("Evaluator")


def evaluate(env: Environment, expr: SExpression) -> LispValue:
    """Evaluate `expr` in `env` and return the resulting expression.

    `env` is mutated only by `defun`, which installs into its ambient scope.
    """
    if isinstance(expr, Atom):
        value = env.lookup(expr.value)
        if value is None:
            raise McLispUnboundSymbol(f"Cannot lookup unbound symbol {expr}")
        return value

    if not isinstance(expr, List):
        raise TypeError(f"Cannot evaluate non-expression {expr!r}")

    if expr.is_empty_list():
        raise McLispNoProcedure("No procedure to call: () in call position")

    head, *tail = expr.items
    if isinstance(head, Atom):
        form = SPECIAL_FORMS.get(head.value)
        if form is not None:
            _logger.debug("special form %s: %s", head.value, expr)
            return form(tail, env, evaluate)

    return apply(head, tail, env, evaluate)
