# Core type aliases for the stepper's data model.
# Terms are plain immutable Python values:
#   Symbol -> sexp_stepper.types.symbol.Symbol
#   Text   -> sexp_stepper.types.text.Text
#   Number -> float
#   List   -> tuple of terms
# No Cons class is defined; an evaluated pair is the 3-tuple (cons car cdr).
#
# The aliases resolve to `Any` so reader, printer and reducer code can share
# annotations without import cycles.

from typing import Any, Callable, Mapping

Term = Any

# Substitution environment used while instantiating a lambda body.
Bindings = Mapping[Any, Term]

# Native operation behind a builtin name; receives the already-reduced operands.
BuiltinFn = Callable[[tuple], Term]

# One-step reducer, passed to special-form handlers.
StepFn = Callable[[Term], Term]
