from sexp_stepper import StepFn, Term
from sexp_stepper.reduction.normal_form import can_step
from sexp_stepper.types.nil import NIL
from sexp_stepper.types.predicates import is_nil
from sexp_stepper.types.term import operand, replace_at


def and_form(form: tuple, step_fn: StepFn) -> Term:
    """Short-circuiting (and a b).

    Reduces `a` in place; a nil `a` yields nil, anything else yields `b`
    unevaluated.
    """
    left = operand(form, 1)
    if can_step(left):
        return replace_at(form, 1, step_fn(left))
    if is_nil(left):
        return NIL
    return operand(form, 2)


def or_form(form: tuple, step_fn: StepFn) -> Term:
    """Short-circuiting (or a b).

    Reduces `a` in place; a nil `a` yields `b` unevaluated, otherwise `a`
    itself is the result.
    """
    left = operand(form, 1)
    if can_step(left):
        return replace_at(form, 1, step_fn(left))
    if is_nil(left):
        return operand(form, 2)
    return left
