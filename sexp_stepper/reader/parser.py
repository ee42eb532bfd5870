"""
  Reader: lexer and parser

- `lex` / `read_token` never raise; characters that start no token come out
  as `invalid` tokens, which keeps them usable for highlighting half-typed
  input.
- `TokenStream.parse_expr` / `parse` build terms and raise
  StepperSyntaxError on anything malformed.

    - identifiers -> Symbol
    - "strings" (JSON escapes) -> Text
    - numbers -> float
    - 'x -> (quote x)
    - (a b c) -> tuple
"""

from __future__ import annotations

import json
import re
from typing import Iterator, Optional

from sexp_stepper import Term
from sexp_stepper.errors import StepperSyntaxError
from sexp_stepper.types.symbol import Symbol, QUOTE
from sexp_stepper.types.text import Text


TOKEN_RE = re.compile(
    r"(?P<symbol>(?:[$]|[^\W\d])[\w$\u200c\u200d?\-]*)"  # identifiers
    r'|(?P<string>"(?:[^\\"]|\\.)*")'  # double-quoted strings
    r"|(?P<number>-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?)"
    r"|(?P<quote>')"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))",
    re.DOTALL,
)

WHITESPACE_RE = re.compile(r"\s*")

Token = tuple[str, str]


def read_token(source: str, pos: int = 0) -> tuple[Token, int]:
    """Read one token starting at `pos`, skipping leading whitespace.

    Returns the token and the position just past it. At end of input the
    token is ("eof", "").
    """
    pos = WHITESPACE_RE.match(source, pos).end()
    if pos >= len(source):
        return ("eof", ""), pos

    m = TOKEN_RE.match(source, pos)
    if m:
        kind = m.lastgroup
        return (kind, m.group(kind)), m.end()

    # Invalid - consume one character
    return ("invalid", source[pos]), pos + 1


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    while True:
        token, pos = read_token(source, pos)
        if token[0] == "eof":
            return
        yield token


class TokenStream:
    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Term:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise StepperSyntaxError("unexpected end of input")

        if tok_type == "symbol":
            return Symbol(tok_val)

        if tok_type == "string":
            try:
                return Text(json.loads(tok_val))
            except ValueError:
                raise StepperSyntaxError(f"invalid string literal: {tok_val}") from None

        if tok_type == "number":
            return float(tok_val)

        if tok_type == "quote":
            return (QUOTE, self.parse_expr())

        if tok_type == "lparen":
            items = []
            while True:
                nxt, _ = self.peek()
                if nxt == "rparen":
                    self.advance()
                    return tuple(items)
                if nxt is None:
                    raise StepperSyntaxError("unmatched '('")
                items.append(self.parse_expr())

        raise StepperSyntaxError(f"unexpected character: {tok_val}")

    def parse_all(self) -> Iterator[Term]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> Term:
    """Read exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if stream.peek()[0] is not None:
        raise StepperSyntaxError("unexpected input after expression")
    return expr
