"""Error taxonomy for mclisp.

Every evaluation failure is raised as a subclass of McLispError and propagates
unchanged to the caller of `evaluate`. Calling an Atom accessor on a List (or
the reverse) is an internal contract violation and raises the built-in
TypeError instead, so it is never mistaken for an evaluation error.
"""

from __future__ import annotations


class McLispError(Exception):
    """ Base class for all mclisp errors"""
    pass

class McLispInvalidSymbol(McLispError):
    """ Raised when something other than a symbol name is bound"""
    pass

class McLispUnboundSymbol(McLispError):
    """ Raised when a symbol is looked up before it is bound"""
    pass

class McLispNoProcedure(McLispError):
    """ Raised when the empty list is evaluated in call position"""

# The empty list has no operator to call; both names refer to the same failure.
McLispNoOperator = McLispNoProcedure

class McLispNotCallable(McLispError):
    """ Raised when the operator position does not resolve to a closure literal"""

class McLispSyntaxError(McLispError):
    """ Raised when program text cannot be read into an expression"""

class McLispTypeError(McLispError):
    """ Raised when an operand has the wrong shape for the operation"""

class McLispMalformedCond(McLispError):
    """ Raised when a cond clause is not a (test result) pair"""


class McLispArityError(McLispError):
    """ Raised when the number of arguments passed to a form or closure is incorrect"""

    def __init__(self, form: str, expected: int, received: int | None = None):
        self.form = form
        self.expected = expected
        self.received = received
        noun = "argument" if expected == 1 else "arguments"
        message = f"{form} expects exactly {expected} {noun}"
        if received is not None:
            message += f", got {received}"
        super().__init__(message)
