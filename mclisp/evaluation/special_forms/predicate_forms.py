"""Special forms: atom and eq.

Both answer with the atom `t` for true and the empty list for false.
"""

from mclisp import SExpression, LispValue, EvaluatorFn
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispArityError
from mclisp.types.expression import Atom, truth


def atom_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(atom e): true for an atom or the empty list."""
    if len(tail) != 1:
        raise McLispArityError("atom", 1, len(tail))
    value = evaluate_fn(env, tail[0])
    return truth(value.is_atom() or value.is_empty_list())


def eq_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """(eq a b): true for two equal atoms or two empty lists.

    Non-empty lists are never eq, even when structurally identical.
    """
    if len(tail) != 2:
        raise McLispArityError("eq", 2, len(tail))
    left = evaluate_fn(env, tail[0])
    right = evaluate_fn(env, tail[1])
    if left.is_empty_list() and right.is_empty_list():
        return truth(True)
    return truth(isinstance(left, Atom) and isinstance(right, Atom) and left == right)
