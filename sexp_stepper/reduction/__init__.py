"""The reducer's public surface: `can_step` and `step`."""

from sexp_stepper.reduction.normal_form import can_step
from sexp_stepper.reduction.step import step
from sexp_stepper.reduction.substitute import rewrite

__all__ = ["can_step", "step", "rewrite"]
