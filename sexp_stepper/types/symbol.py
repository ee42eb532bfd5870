"""
  Symbols

An identifier term. Names are interned, so two symbols read from different
places share one string and compare by name. A Symbol never equals a Text
with the same characters.

Reserved heads
--------------
Lists starting with one of these are read by shape rather than applied:

    - quote   literal datum, 'x
    - lambda  function value (lambda (params...) body)
    - if      (if cond then [else])
    - and/or  short-circuit over two operands
    - cons    a 3-element (cons h t) is an evaluated pair
"""

from __future__ import annotations

import sys


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


QUOTE = Symbol("quote")
LAMBDA = Symbol("lambda")
IF = Symbol("if")
AND = Symbol("and")
OR = Symbol("or")
CONS = Symbol("cons")
