"""Application engine for the reducer.

Runs once every element of an application is in normal form:
- a lambda operator has its body instantiated with the operands;
- a builtin name calls the native operation with the operands;
- anything else is an invalid operator.
"""

from __future__ import annotations

from sexp_stepper import Term
from sexp_stepper.builtins import BUILTINS
from sexp_stepper.errors import StepperInvalidLambda, StepperInvalidOperator
from sexp_stepper.printer import to_source
from sexp_stepper.reduction.substitute import rewrite
from sexp_stepper.types.nil import NIL
from sexp_stepper.types.symbol import Symbol
from sexp_stepper.types.predicates import is_lambda


def apply_lambda(fn: tuple, operands: tuple) -> Term:
    """Instantiate `fn`'s body with `operands`.

    Operands bind positionally. A parameter without an operand binds to nil
    and operands past the last parameter are dropped.
    """
    params = fn[1] if len(fn) > 1 else NIL
    if not (
        len(fn) == 3
        and isinstance(params, tuple)
        and all(isinstance(p, Symbol) for p in params)
    ):
        raise StepperInvalidLambda(to_source(fn) + " is not a valid lambda")

    bindings: dict[Symbol, Term] = {}
    for i, name in enumerate(params):
        bindings[name] = operands[i] if i < len(operands) else NIL
    return rewrite(fn[2], bindings)


def apply(head: Term, operands: tuple) -> Term:
    if is_lambda(head):
        return apply_lambda(head, operands)
    if isinstance(head, Symbol):
        execute = BUILTINS.get(head)
        if execute is None:
            raise StepperInvalidOperator(to_source(head) + " is not defined")
        return execute(operands)
    raise StepperInvalidOperator("expected symbol, got " + to_source(head))
