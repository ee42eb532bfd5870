from __future__ import annotations

from sexp_stepper.types.symbol import Symbol, QUOTE

# The empty datum and the canonical truth value. Built once and shared;
# tuples are immutable so handing out the same object is safe.
NIL = (QUOTE, ())
TRUE = (QUOTE, Symbol("true"))
