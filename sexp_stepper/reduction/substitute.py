"""Substitution of lambda parameters into a body.

Bindings are never mutated: entering a nested lambda builds a fresh mapping
without that lambda's parameters, so an inner parameter shadows the outer
substitution of the same name. Bound variables are not renamed, so a free
symbol inside an argument can still be captured by a differently named
inner lambda whose parameter happens to share its name.
"""

from __future__ import annotations

from sexp_stepper import Term, Bindings
from sexp_stepper.types.symbol import Symbol
from sexp_stepper.types.predicates import is_lambda, is_quote


def _shadow(params: Term, bindings: Bindings) -> Bindings:
    if not isinstance(params, tuple):
        return bindings
    bound = {p for p in params if isinstance(p, Symbol)}
    if not bound.intersection(bindings):
        return bindings
    return {name: value for name, value in bindings.items() if name not in bound}


def rewrite(term: Term, bindings: Bindings) -> Term:
    if isinstance(term, Symbol):
        return bindings.get(term, term)
    if not isinstance(term, tuple):
        return term
    if is_quote(term):
        # quoted data is literal
        return term
    if is_lambda(term):
        if len(term) < 2:
            return term
        params = term[1]
        inner = _shadow(params, bindings)
        return (term[0], params) + tuple(rewrite(t, inner) for t in term[2:])
    return tuple(rewrite(t, bindings) for t in term)
