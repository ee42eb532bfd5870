"""Term model: Symbol, Text, Number (float) and List (tuple)."""

from sexp_stepper.types.symbol import Symbol, QUOTE, LAMBDA, IF, AND, OR, CONS
from sexp_stepper.types.text import Text
from sexp_stepper.types.nil import NIL, TRUE
from sexp_stepper.types.term import operand, replace_at
from sexp_stepper.types.predicates import (
    equals,
    is_cons,
    is_lambda,
    is_list,
    is_nil,
    is_number,
    is_quote,
    is_quoted_symbol,
    is_symbol,
    is_text,
)

__all__ = [
    "Symbol", "Text", "NIL", "TRUE",
    "QUOTE", "LAMBDA", "IF", "AND", "OR", "CONS",
    "operand", "replace_at", "equals",
    "is_cons", "is_lambda", "is_list", "is_nil", "is_number",
    "is_quote", "is_quoted_symbol", "is_symbol", "is_text",
]
