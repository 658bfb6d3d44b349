"""Closure values derived from `lambda` and `label` literals.

A closure is not stored anywhere; it is recovered on demand from an
expression of shape

    (lambda (p1 p2 ...) body)
    (label name (lambda (p1 p2 ...) body))

Parsing never raises: anything else is simply not a closure literal and the
caller decides whether that is fatal.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from mclisp import SExpression
from mclisp.types.expression import Atom, Expression, List, is_symbol


class Closure:
    """Formal parameters, an unevaluated body and an optional self-name."""

    __slots__ = ("params", "body", "name")

    def __init__(self, params: list[str], body: SExpression, name: str | None = None):
        self.params: list[str] = params
        self.body: SExpression = body
        # Only closures read from a label literal can refer to themselves
        self.name: str | None = name

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        with StringIO() as buffer:
            if self.name is not None:
                buffer.write(f"(label {self.name} ")
            buffer.write("(lambda (")
            buffer.write(" ".join(self.params))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            if self.name is not None:
                buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Closure {self}>"


def parse_lambda(expr: Expression) -> Optional[Closure]:
    if not isinstance(expr, List) or len(expr) != 3 or not is_symbol("lambda", expr[0]):
        return None
    params = expr[1]
    if not isinstance(params, List):
        return None
    if not all(isinstance(p, Atom) for p in params):
        return None
    return Closure([p.atom_value() for p in params], expr[2])


def parse_label(expr: Expression) -> Optional[Closure]:
    if not isinstance(expr, List) or len(expr) != 3 or not is_symbol("label", expr[0]):
        return None
    if not isinstance(expr[1], Atom):
        return None
    closure = parse_lambda(expr[2])
    if closure is None:
        return None
    closure.name = expr[1].atom_value()
    return closure


def parse_closure(expr: Expression) -> Optional[Closure]:
    """Read `expr` as a lambda or label literal, or return None."""
    closure = parse_lambda(expr)
    if closure is None:
        closure = parse_label(expr)
    return closure


def has_bad_params(expr: Expression) -> bool:
    """True for a literal shaped like a lambda or label whose parameters are not all atoms.

    Such a literal is not a closure; the application engine reports it as a
    type error instead of a missing operator.
    """
    if not isinstance(expr, List) or len(expr) != 3:
        return False
    if is_symbol("label", expr[0]):
        return isinstance(expr[1], Atom) and has_bad_params(expr[2])
    if not is_symbol("lambda", expr[0]) or not isinstance(expr[1], List):
        return False
    return not all(isinstance(p, Atom) for p in expr[1])


def label_literal(name: Atom, params: List, body: SExpression) -> List:
    """Build `(label name (lambda params body))`."""
    return List([Atom("label"), name, List([Atom("lambda"), params, body])])
