"""Named example programs for the command line and tests."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

from sexp_stepper import Term
from sexp_stepper.reader.parser import parse


@dataclass(frozen=True)
class Example:
    name: str
    source: str
    description: str = ""

    def term(self) -> Term:
        return parse(self.source)


FACTORIAL = r"""
((lambda (Y) ((lambda (factorial)
  (factorial 5))
  (Y (lambda (recursive-factorial)
       (lambda (x)
         (if (lte x 0)
             1
             (mul x (recursive-factorial (sub x 1)))))))))
  ((lambda (f)
     (f f))
   (lambda (z)
     (lambda (f)
       (f (lambda (x) (((z z) f) x)))))))"""[1:]

INFINITE_RECURSION = r"""
((lambda (Y)
  ((Y (lambda (self) (lambda (i) (self (add i 1))))) 0))
  (lambda (f)
    (f
      (lambda (x)
        ((((lambda (z)
          (lambda (f) (f (lambda (x) (((z z) f) x)))))
          (lambda (z)
            (lambda (f) (f (lambda (x) (((z z) f) x))))))
          f)
          x)))))"""[1:]

EXAMPLES: Dict[str, Example] = {
    e.name: e
    for e in (
        Example("factorial", FACTORIAL, "5! through a strict fixed-point combinator"),
        Example("infinite recursion", INFINITE_RECURSION, "a counter that never reaches normal form"),
    )
}


def get_example(name: str) -> Example:
    try:
        return EXAMPLES[name]
    except KeyError:
        raise KeyError(f"unknown example {name!r}; choose from {', '.join(sorted(EXAMPLES))}") from None
