from mclisp import SExpression, LispValue, EvaluatorFn
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispArityError


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(quote e) returns e without evaluating it."""
    if len(tail) != 1:
        raise McLispArityError("quote", 1, len(tail))
    return tail[0]
