"""Application engine for mclisp.

Resolves the operator of a call to a closure and applies it:

1. The operator expression is read directly as a `lambda`/`label` literal.
   When it is not one, it is evaluated exactly once and the result is read
   again. This allows calling through a symbol bound to a closure literal;
   deeper indirection (a symbol bound to a symbol bound to a closure) is not
   followed.
2. The argument count must equal the closure's parameter count.
3. Arguments are evaluated eagerly, left to right, in the caller's scope.
4. The body runs in a child scope of the caller holding the parameter
   bindings and, for a `label` closure, its own name bound to the original
   literal so recursive calls resolve the same way.
"""

from __future__ import annotations

import logging

from mclisp import SExpression, LispValue, EvaluatorFn
from mclisp.types.closure import Closure, has_bad_params, parse_closure
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispArityError, McLispNotCallable, McLispTypeError
from mclisp.types.expression import Atom

_logger = logging.getLogger("Evaluator")


def resolve_operator(
    op_expr: SExpression, env: Environment, evaluate_fn: EvaluatorFn
) -> tuple[Closure, SExpression]:
    """Return the closure for `op_expr` together with the literal it was read from."""
    closure = parse_closure(op_expr)
    if closure is not None:
        return closure, op_expr

    if has_bad_params(op_expr):
        raise McLispTypeError(f"lambda parameters must be symbols: {op_expr}")

    literal = evaluate_fn(env, op_expr)
    closure = parse_closure(literal)
    if closure is None:
        if has_bad_params(literal):
            raise McLispTypeError(f"lambda parameters must be symbols: {literal}")
        raise McLispNotCallable(f"{op_expr} is not a function: {literal}")
    return closure, literal


def apply_closure(
    closure: Closure,
    literal: SExpression,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    called_as: str | None = None,
) -> LispValue:
    """Apply `closure` to unevaluated `arg_exprs` from the calling scope `env`.

    `called_as` is the symbol the call went through, if any; arity errors
    name it in preference to the closure's own label.
    """
    if len(arg_exprs) != closure.arity:
        raise McLispArityError(
            called_as or closure.name or str(literal), closure.arity, len(arg_exprs)
        )

    bindings: dict[str, LispValue] = {}
    # Parameters are bound after the self-name so a parameter may shadow it
    if closure.name is not None:
        bindings[closure.name] = literal
    for param, arg in zip(closure.params, arg_exprs):
        bindings[param] = evaluate_fn(env, arg)

    _logger.debug("apply %s to %s", closure.name or "lambda", list(bindings.items()))
    return evaluate_fn(env.extend(bindings), closure.body)


def apply(
    op_expr: SExpression,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    closure, literal = resolve_operator(op_expr, env, evaluate_fn)
    called_as = op_expr.value if isinstance(op_expr, Atom) else None
    return apply_closure(closure, literal, arg_exprs, env, evaluate_fn, called_as)
