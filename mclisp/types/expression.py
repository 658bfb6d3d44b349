"""Expression tree: the single data model for mclisp code and values.

An expression is either an Atom (an indivisible symbol) or a List of
sub-expressions. The empty list doubles as nil/false and the atom `t` is the
canonical true value. Trees are immutable: List stores a tuple and every
operation that "changes" a list builds a new node.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class Expression(Generic[T]):
    """Common base of Atom and List."""

    __slots__ = ()

    def is_atom(self) -> bool:
        return False

    def is_list(self) -> bool:
        return not self.is_atom()

    def is_empty_list(self) -> bool:
        return False

    def atom_value(self) -> T:
        raise TypeError(f"called atom_value() on non-Atom {self}")

    def list_items(self) -> tuple[Expression[T], ...]:
        raise TypeError(f"called list_items() on non-List {self}")


class Atom(Expression[T]):
    __slots__ = ("value",)

    def __init__(self, value: T):
        # Intern string payloads to make symbol comparison cheap
        self.value: T = sys.intern(value) if isinstance(value, str) else value

    def is_atom(self) -> bool:
        return True

    def atom_value(self) -> T:
        return self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Atom) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("atom", self.value))

    def __repr__(self):
        return f"Atom({self.value!r})"

    def __str__(self):
        return str(self.value)


class List(Expression[T]):
    __slots__ = ("items",)

    def __init__(self, items: Iterable[Expression[T]] = ()):
        self.items: tuple[Expression[T], ...] = tuple(items)

    def is_empty_list(self) -> bool:
        return not self.items

    def list_items(self) -> tuple[Expression[T], ...]:
        return self.items

    def first(self) -> Expression[T]:
        return self.items[0]

    def rest(self) -> List[T]:
        return List(self.items[1:])

    def prepend(self, head: Expression[T]) -> List[T]:
        return List((head, *self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index: int) -> Expression[T]:
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, List) and self.items == other.items

    def __hash__(self) -> int:
        return hash(("list", self.items))

    def __repr__(self):
        return f"List({list(self.items)!r})"

    def __str__(self):
        with StringIO() as buffer:
            buffer.write("(")
            buffer.write(" ".join(str(item) for item in self.items))
            buffer.write(")")
            return buffer.getvalue()


NIL: List = List()
TRUE: Atom = Atom("t")


def empty_list() -> List:
    """Return the canonical nil/false value."""
    return NIL


def is_symbol(name: str, expr: Expression) -> bool:
    """True iff `expr` is an Atom whose payload is `name`."""
    return isinstance(expr, Atom) and expr.value == name


def truth(flag: bool) -> Expression:
    return TRUE if flag else NIL


def from_python(obj) -> Expression:
    """Build an expression from nested Python strings and lists.

    >>> str(from_python(["cons", ["quote", "a"], ["quote", ["b"]]]))
    '(cons (quote a) (quote (b)))'
    """
    if isinstance(obj, Expression):
        return obj
    if isinstance(obj, (list, tuple)):
        return List(from_python(item) for item in obj)
    return Atom(obj)
