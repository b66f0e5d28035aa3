"""
  Lisp Reader: tokenizer and recursive-descent parser

- Emits Python primitives instead of Cons cells:

    - lists -> Python list
    - symbols -> Symbol
    - integers -> int

  There are no strings, comments or quote shorthands: the only tokens are
  "(", ")" and whitespace-delimited atoms.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, Optional

from tinyscheme import SExpression
from tinyscheme.errors import SchemeSyntaxError, RecursionDepthError
from tinyscheme.types.symbol import Symbol

logger = logging.getLogger(__name__)

# Leading base-10 integer prefix; "12abc" reads as 12.
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def tokenize(source: str) -> list[str]:
    """Split source text into "(", ")" and atom tokens."""
    return source.replace("(", " ( ").replace(")", " ) ").split()


def atom(token: str) -> SExpression:
    """Classify a token as an integer literal or a Symbol."""
    m = INTEGER_RE.match(token)
    if m:
        return int(m.group())
    return Symbol(token)


class TokenStream:
    """Consumes tokens from the front of a token sequence."""

    def __init__(self, tokens: Iterable[str]):
        self.tokens: Iterator[str] = iter(tokens)
        self.buffer: list[str] = []

    def peek(self) -> Optional[str]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[str]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def parse_expr(self) -> SExpression:
        token = self.advance()
        if token is None:
            raise SchemeSyntaxError("unexpected end of input")

        if token == "(":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise SchemeSyntaxError("unexpected end of input")
                if nxt == ")":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if token == ")":
            raise SchemeSyntaxError("mismatched parenthesis")

        return atom(token)

    def read(self) -> SExpression:
        """parse_expr, with host stack exhaustion reported as RecursionDepthError."""
        try:
            return self.parse_expr()
        except RecursionError:
            raise RecursionDepthError("form nested too deeply to read") from None

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek() is not None:
            expr = self.read()
            logger.debug("read form %r", expr)
            yield expr


def parse(source: str) -> SExpression:
    """Parse the first complete form in `source`; trailing tokens are ignored."""
    expr = TokenStream(tokenize(source)).read()
    logger.debug("parsed %r", expr)
    return expr


def parse_all(source: str) -> Iterator[SExpression]:
    """Yield every top-level form in `source`, in order."""
    return TokenStream(tokenize(source)).parse_all()
