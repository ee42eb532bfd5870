"""Term recognizers used as guards throughout the reducer."""

from __future__ import annotations

from sexp_stepper import Term
from sexp_stepper.types.symbol import Symbol, QUOTE, LAMBDA, CONS
from sexp_stepper.types.text import Text


def is_symbol(term: Term) -> bool:
    return isinstance(term, Symbol)


def is_text(term: Term) -> bool:
    return isinstance(term, Text)


def is_number(term: Term) -> bool:
    # bool is an int subclass but never a Number term
    return isinstance(term, float) or (isinstance(term, int) and not isinstance(term, bool))


def is_list(term: Term) -> bool:
    return isinstance(term, tuple)


def is_nil(term: Term) -> bool:
    return (
        isinstance(term, tuple)
        and len(term) == 2
        and term[0] == QUOTE
        and isinstance(term[1], tuple)
        and len(term[1]) == 0
    )


def is_quote(term: Term) -> bool:
    return isinstance(term, tuple) and len(term) > 0 and term[0] == QUOTE


def is_quoted_symbol(term: Term) -> bool:
    return is_quote(term) and len(term) > 1 and isinstance(term[1], Symbol)


def is_lambda(term: Term) -> bool:
    return isinstance(term, tuple) and len(term) > 0 and term[0] == LAMBDA


def is_cons(term: Term) -> bool:
    """An evaluated pair: exactly (cons car cdr)."""
    return isinstance(term, tuple) and len(term) == 3 and term[0] == CONS


def equals(a: Term, b: Term) -> bool:
    """Deep structural equality.

    Numbers compare numerically (so NaN is never equal to itself), a Symbol
    never equals a Text, and Lists must match in length and element-wise.
    """
    if isinstance(a, tuple) and isinstance(b, tuple):
        return len(a) == len(b) and all(equals(x, y) for x, y in zip(a, b))
    if is_number(a) and is_number(b):
        return a == b
    if type(a) is not type(b):
        return False
    return a == b
