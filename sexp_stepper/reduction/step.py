"""Small-step reducer.

Each call to `step` performs exactly one rewrite and returns a new term;
the input is never modified. Evaluation order:

- special forms (`if`, `and`, `or`) reduce their first operand and then
  pick a result without touching the operands they discard;
- any other list is scanned from the operator position rightwards and the
  first element that can step is stepped;
- when every element is in normal form the operator is applied.
"""

from __future__ import annotations

from sexp_stepper import Term
from sexp_stepper.errors import StepperUndefinedSymbol
from sexp_stepper.reduction.apply import apply
from sexp_stepper.reduction.normal_form import can_step
from sexp_stepper.reduction.special_forms import SPECIAL_FORMS
from sexp_stepper.types.nil import NIL
from sexp_stepper.types.symbol import Symbol
from sexp_stepper.types.term import replace_at


def step(term: Term) -> Term:
    if not can_step(term):
        return term

    if isinstance(term, Symbol):
        raise StepperUndefinedSymbol(f"{term} is not defined")

    head = term[0] if term else NIL
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        return SPECIAL_FORMS[head](term, step)

    for i, element in enumerate(term):
        if can_step(element):
            return replace_at(term, i, step(element))

    return apply(head, term[1:])
