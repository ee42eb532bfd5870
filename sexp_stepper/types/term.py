"""Helpers for reading and rebuilding List terms without mutation."""

from __future__ import annotations

from sexp_stepper import Term
from sexp_stepper.types.nil import NIL


def operand(form: tuple, index: int, default: Term = NIL) -> Term:
    """Element `index` of `form`, or `default` when the form is too short."""
    return form[index] if index < len(form) else default


def replace_at(form: tuple, index: int, value: Term) -> tuple:
    """A copy of `form` with only position `index` replaced."""
    return form[:index] + (value,) + form[index + 1:]
