"""Registry of special forms for the reducer.

Maps head Symbols to handlers that take the whole form and the one-step
reducer. The step engine consults this table before ordinary application,
so operands of these forms are not scanned left to right.
"""

from sexp_stepper.types.symbol import IF, AND, OR
from sexp_stepper.reduction.special_forms.if_form import if_form
from sexp_stepper.reduction.special_forms.logic_forms import and_form, or_form

SPECIAL_FORMS = {
    IF: if_form,
    AND: and_form,
    OR: or_form,
}
