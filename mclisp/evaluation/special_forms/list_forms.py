"""Special forms: car, cdr and cons.

car and cdr are permissive: applied to an atom or the empty list they return
the empty list instead of failing.
"""

from mclisp import SExpression, LispValue, EvaluatorFn
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispArityError, McLispTypeError
from mclisp.types.expression import List, empty_list


def car_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise McLispArityError("car", 1, len(tail))
    value = evaluate_fn(env, tail[0])
    if isinstance(value, List) and not value.is_empty_list():
        return value.first()
    return empty_list()


def cdr_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise McLispArityError("cdr", 1, len(tail))
    value = evaluate_fn(env, tail[0])
    if isinstance(value, List) and not value.is_empty_list():
        return value.rest()
    return empty_list()


def cons_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 2:
        raise McLispArityError("cons", 2, len(tail))
    head = evaluate_fn(env, tail[0])
    rest = evaluate_fn(env, tail[1])
    if not isinstance(rest, List):
        raise McLispTypeError(f"cons second argument must be a list, got {rest}")
    return rest.prepend(head)
