from sexp_stepper import StepFn, Term
from sexp_stepper.reduction.normal_form import can_step
from sexp_stepper.types.nil import NIL
from sexp_stepper.types.predicates import is_nil
from sexp_stepper.types.term import operand, replace_at


def if_form(form: tuple, step_fn: StepFn) -> Term:
    """(if cond then [else])

    Steps the condition in place until it is in normal form, then selects a
    branch. The branch not taken is dropped without being reduced.
    """
    cond = operand(form, 1)
    if can_step(cond):
        return replace_at(form, 1, step_fn(cond))

    if not is_nil(cond):
        return operand(form, 2)
    return operand(form, 3, NIL)
