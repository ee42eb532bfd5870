import pytest

from sexp_stepper.reader.parser import parse
from sexp_stepper.reduction import can_step, step


def reduce_to_normal_form(term, limit=100_000):
    """Step `term` until it stops changing; returns (term, steps)."""
    steps = 0
    while can_step(term):
        if steps >= limit:
            raise AssertionError(f"no normal form within {limit} steps")
        term = step(term)
        steps += 1
    return term, steps


@pytest.fixture
def evaluate():
    """Parse source text and reduce it to normal form."""
    def _evaluate(source, limit=100_000):
        term, _ = reduce_to_normal_form(parse(source), limit)
        return term
    return _evaluate
