import logging

from mclisp import SExpression, LispValue, EvaluatorFn
from mclisp.types.closure import label_literal
from mclisp.types.environment import Environment
from mclisp.types.errors import McLispArityError, McLispTypeError
from mclisp.types.expression import Atom, List, empty_list

_logger = logging.getLogger("Evaluator")


def defun_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (defun name (params...) body)
    Installs (label name (lambda (params...) body)) under `name` in the ambient
    scope, where it stays for the rest of the program. Returns the empty list.
    """
    if len(tail) != 3:
        raise McLispArityError("defun", 3, len(tail))

    name, params, body = tail
    if not isinstance(name, Atom):
        raise McLispTypeError(f"defun name must be a symbol, got {name}")
    if not isinstance(params, List) or not all(isinstance(p, Atom) for p in params):
        raise McLispTypeError(f"defun parameters must be a list of symbols, got {params}")

    env.define_global(name.value, label_literal(name, params, body))
    _logger.debug("defun %s %s", name, params)
    return empty_list()
