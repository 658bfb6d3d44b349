"""Special form: cond.

(cond (test1 result1) (test2 result2) ...)

Clauses are tried in order. The first clause whose test evaluates to the atom
`t` has its result evaluated and returned; later clauses are never looked at.
With no true clause the result is the empty list.
"""

from mclisp import SExpression, LispValue, EvaluatorFn
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispMalformedCond
from mclisp.types.expression import List, TRUE, empty_list


def cond_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    for clause in tail:
        if not isinstance(clause, List) or len(clause) != 2:
            raise McLispMalformedCond(f"cond clause must be a (test result) pair, got {clause}")
        test, result = clause.items
        if evaluate_fn(env, test) == TRUE:
            return evaluate_fn(env, result)
    return empty_list()
