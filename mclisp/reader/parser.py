"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Expression trees:

    - parenthesised lists -> List
    - every other token   -> Atom (numbers and strings are not interpreted)
    - 'x                  -> (quote x)
    - ; comment           -> skipped to end of line
    - " ` , [ ] { } and a quote inside a symbol are rejected
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, Optional

from mclisp import SExpression
from mclisp.types.errors import McLispSyntaxError
from mclisp.types.expression import Atom, List

_logger = logging.getLogger("Reader")

TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote shorthand
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<symbol>[^\s()\';"`,\[\]{}]+)',  # everything else except reserved punctuation
    re.DOTALL,
)


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise McLispSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        if kind == "symbol" and pos < n and source[pos] == "'":
            raise McLispSyntaxError(f"Quote inside symbol at {pos}: {source[m.start():pos + 1]!r}")
        yield kind, m.group(kind)


class TokenStream:
    """Parse expressions one at a time from a token iterator."""

    def __init__(self, tokens: Iterable[tuple[str, str]]):
        self.tokens = iter(tokens)
        self.peeked: Optional[tuple[str, str]] = None

    def next_token(self) -> Optional[tuple[str, str]]:
        if self.peeked is not None:
            token, self.peeked = self.peeked, None
            return token
        return next(self.tokens, None)

    def peek(self) -> Optional[tuple[str, str]]:
        if self.peeked is None:
            self.peeked = next(self.tokens, None)
        return self.peeked

    def parse_expr(self) -> Optional[SExpression]:
        """Return the next expression, or None at end of input."""
        token = self.next_token()
        if token is None:
            return None
        return self._parse_from(token)

    def _parse_from(self, token: tuple[str, str]) -> SExpression:
        kind, value = token
        if kind == "lparen":
            return self._parse_list()
        if kind == "rparen":
            raise McLispSyntaxError("Unexpected ')'")
        if kind == "quote":
            nxt = self.next_token()
            if nxt is None:
                raise McLispSyntaxError("Unexpected EOF after quote")
            return List([Atom("quote"), self._parse_from(nxt)])
        return Atom(value)

    def _parse_list(self) -> List:
        items = []
        while True:
            token = self.next_token()
            if token is None:
                raise McLispSyntaxError("Unexpected EOF while reading list")
            if token[0] == "rparen":
                return List(items)
            items.append(self._parse_from(token))


def parse(source: str) -> list[SExpression]:
    """Read every top-level expression in `source`."""
    stream = TokenStream(lex(source))
    exprs = []
    while True:
        expr = stream.parse_expr()
        if expr is None:
            break
        exprs.append(expr)
    _logger.debug("read %d expression(s)", len(exprs))
    return exprs


def parse_one(source: str) -> SExpression:
    """Read exactly one expression from `source`."""
    exprs = parse(source)
    if len(exprs) != 1:
        raise McLispSyntaxError(f"Expected exactly one expression, found {len(exprs)}")
    return exprs[0]
