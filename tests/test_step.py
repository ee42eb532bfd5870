import pytest

from sexp_stepper.errors import (
    StepperInvalidLambda,
    StepperInvalidOperator,
    StepperTypeError,
    StepperUndefinedSymbol,
)
from sexp_stepper.reader.parser import parse
from sexp_stepper.reduction import can_step, step
from sexp_stepper.types.nil import NIL, TRUE
from sexp_stepper.types.symbol import Symbol, LAMBDA, CONS
from sexp_stepper.types.text import Text


def trace(source):
    """Every state from the parsed program down to its normal form."""
    term = parse(source)
    states = [term]
    while can_step(term):
        term = step(term)
        states.append(term)
    return states


# -------------------------------
# can_step
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("5", False),
        ('"text"', False),
        ("add", False),
        ("typeof", False),
        ("undefined-name", True),
        ("if", True),
        ("'()", False),
        ("'true", False),
        ("'(1 2)", True),
        ("(lambda (x) (add 1 2))", False),
        ("(lambda)", False),
        ("(cons 1 2)", False),
        ("(cons (add 1 2) 3)", True),
        ("(cons 1 (sub 3 1))", True),
        ("(cons 1)", True),
        ("()", True),
        ("(add 1 2)", True),
        ("(if '() 1 2)", True),
    ]
)
def test_can_step(source, expected):
    assert can_step(parse(source)) is expected


def test_can_step_has_no_side_effects():
    term = parse("(if (lt 1 2) (add 1 2) (car 5))")
    before = repr(term)
    assert [can_step(term) for _ in range(3)] == [True, True, True]
    assert repr(term) == before


# -------------------------------
# Fixed point
# -------------------------------
@pytest.mark.parametrize(
    "term",
    [5.0, Text("s"), Symbol("add"), NIL, TRUE, (LAMBDA, (Symbol("x"),), Symbol("x")), (CONS, 1.0, NIL)],
)
def test_step_returns_normal_forms_unchanged(term):
    assert step(term) is term


# -------------------------------
# Builtin application
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(add 2 3)", 5),
        ("(sub 2 3)", -1),
        ("(eql (quote true) (quote true))", TRUE),
        ("(eql 1 2)", NIL),
    ]
)
def test_builtin_application_is_one_step(source, expected):
    assert step(parse(source)) == expected


def test_leftmost_redex_first():
    assert trace("(add (mul 2 3) (sub 5 1))") == [
        parse("(add (mul 2 3) (sub 5 1))"),
        parse("(add 6 (sub 5 1))"),
        parse("(add 6 4)"),
        10.0,
    ]


def test_operator_is_reduced_before_operands():
    assert trace("((if 'true add sub) (mul 2 3) 1)")[1] == parse("(add (mul 2 3) 1)")


def test_each_step_changes_one_position():
    before = parse("(add (mul 2 3) (sub 5 1) (div 8 2))")
    after = step(before)
    changed = [i for i, (a, b) in enumerate(zip(before, after)) if a != b]
    assert len(after) == len(before)
    assert changed == [1]
    assert after[2] is before[2]


# -------------------------------
# Special forms
# -------------------------------
def test_if_short_circuits_else_branch():
    assert trace("(if (quote true) 1 (div 1 0))") == [parse("(if (quote true) 1 (div 1 0))"), 1.0]


def test_if_short_circuits_then_branch():
    assert trace("(if (quote ()) (car 5) 2)")[-1] == 2.0


def test_if_does_not_raise_for_untaken_error_branch():
    assert trace("(if 'true 1 (undefined-name 1))")[-1] == 1.0


def test_if_reduces_condition_in_place():
    assert trace("(if (eql 1 1) 'yes 'no)") == [
        parse("(if (eql 1 1) 'yes 'no)"),
        parse("(if 'true 'yes 'no)"),
        parse("'yes"),
    ]


def test_if_without_else_gives_nil():
    assert step(parse("(if '() 1)")) == NIL


def test_if_any_non_nil_is_true():
    assert step(parse("(if 0 'a 'b)")) == parse("'a")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(or '() 5)", 5.0),
        ("(or 3 5)", 3.0),
        ("(or 'true (car 5))", TRUE),
        ("(or (eql 1 2) 7)", 7.0),
        ("(and '() (car 5))", NIL),
        ("(and 1 2)", 2.0),
        ("(and (lt 1 2) (add 1 1))", 2.0),
        ("(or)", NIL),
        ("(and 1)", NIL),
    ]
)
def test_logic_forms(source, expected):
    assert trace(source)[-1] == expected


def test_or_returns_left_operand_not_boolean():
    assert step(parse("(or (cons 1 2) 3)")) == (CONS, 1.0, 2.0)


# -------------------------------
# Lambda application
# -------------------------------
def test_identity_application():
    assert trace("((lambda (x) x) 5)") == [parse("((lambda (x) x) 5)"), 5.0]


def test_arguments_are_reduced_before_application():
    assert trace("((lambda (x) x) (add 1 2))") == [
        parse("((lambda (x) x) (add 1 2))"),
        parse("((lambda (x) x) 3)"),
        3.0,
    ]


def test_extra_arguments_are_dropped():
    assert step(parse("((lambda (x) x) 1 2)")) == 1.0


def test_missing_arguments_bind_to_nil():
    assert step(parse("((lambda (x y) y) 1)")) == NIL


def test_builtin_passed_as_value():
    assert trace("((lambda (f) (f 2 3)) add)")[1:] == [parse("(add 2 3)"), 5.0]


def test_lambda_body_is_not_reduced():
    term = parse("(lambda (x) (add 1 2))")
    assert step(term) is term


def test_inner_lambda_shadows_outer_parameter():
    assert trace("((lambda (x) ((lambda (x) x) 2)) 1)") == [
        parse("((lambda (x) ((lambda (x) x) 2)) 1)"),
        parse("((lambda (x) x) 2)"),
        2.0,
    ]


def test_quoted_data_is_not_substituted():
    assert step(parse("((lambda (x) (cons 'x x)) 1)")) == parse("(cons 'x 1)")


def test_free_symbol_in_argument_can_be_captured():
    # the x inside the argument ends up bound by the inner (lambda (x) ...)
    states = trace("(((lambda (y) (lambda (x) y)) (lambda () x)) 5)")
    assert states[1] == parse("((lambda (x) (lambda () x)) 5)")
    assert states[-1] == parse("(lambda () 5)")


# -------------------------------
# Pairs
# -------------------------------
def test_cons_contents_are_reduced_eagerly():
    assert trace("(cons (add 1 2) '())") == [
        parse("(cons (add 1 2) '())"),
        parse("(cons 3 '())"),
    ]


def test_short_cons_is_completed_with_nil():
    assert step(parse("(cons 1)")) == (CONS, 1.0, NIL)


def test_car_and_cdr():
    assert trace("(car (cons 1 2))")[-1] == 1.0
    assert trace("(cdr (cons 1 2))")[-1] == 2.0


# -------------------------------
# Errors
# -------------------------------
def test_undefined_symbol():
    with pytest.raises(StepperUndefinedSymbol, match="undefined-name is not defined"):
        step(parse("undefined-name"))


def test_undefined_operator_symbol():
    with pytest.raises(StepperUndefinedSymbol):
        step(parse("(foo 1)"))


def test_quoted_list_is_not_a_value():
    with pytest.raises(StepperUndefinedSymbol, match="quote"):
        step(parse("'(1 2)"))


def test_car_of_number():
    with pytest.raises(StepperTypeError):
        step(parse("(car 5)"))


@pytest.mark.parametrize(
    "source",
    ["(5 1)", '("f" 1)', "()", "((cons 1 2) 3)", "('() 1)"],
)
def test_invalid_operator(source):
    with pytest.raises(StepperInvalidOperator):
        step(parse(source))


@pytest.mark.parametrize(
    "source",
    ["((lambda x x) 1)", "((lambda (x)) 1)", "((lambda (x 1) x) 1)", "((lambda (x) x x) 1)"],
)
def test_invalid_lambda(source):
    with pytest.raises(StepperInvalidLambda):
        step(parse(source))


def test_failed_step_leaves_input_intact():
    term = parse("(add 1 (car 5))")
    snapshot = repr(term)
    with pytest.raises(StepperTypeError):
        step(term)
    assert repr(term) == snapshot


def test_substitution_does_not_repair_malformed_inner_lambda():
    term = step(parse("((lambda (y) ((lambda (x) x y) 1)) 2)"))
    assert term == parse("((lambda (x) x 2) 1)")
    with pytest.raises(StepperInvalidLambda):
        step(term)
