"""Decides whether a term still has a rewrite to perform."""

from __future__ import annotations

from sexp_stepper import Term
from sexp_stepper.builtins import is_builtin
from sexp_stepper.types.symbol import Symbol
from sexp_stepper.types.predicates import is_cons, is_lambda, is_nil, is_quoted_symbol


def can_step(term: Term) -> bool:
    """
    True when a single call to `step` would change `term`.

    A bare Symbol that is not a builtin name is reported steppable so that
    stepping it raises StepperUndefinedSymbol. A builtin name on its own is
    a value; builtins only run through application.
    """
    if isinstance(term, Symbol):
        return not is_builtin(term)
    if not isinstance(term, tuple):
        # numbers and text
        return False
    if is_cons(term):
        return can_step(term[1]) or can_step(term[2])
    if is_nil(term) or is_quoted_symbol(term) or is_lambda(term):
        return False
    return True
