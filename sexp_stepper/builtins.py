from __future__ import annotations
import math

from sexp_stepper import Term, BuiltinFn
from sexp_stepper.errors import StepperTypeError
from sexp_stepper.printer import to_source
from sexp_stepper.types.symbol import Symbol, QUOTE, CONS
from sexp_stepper.types.text import Text
from sexp_stepper.types.nil import NIL, TRUE
from sexp_stepper.types.predicates import equals, is_cons, is_nil, is_number

# Builtins are called with the reduced operands of an application. Missing
# operands read as nil and surplus operands are ignored.


def _operands(args: tuple, n: int) -> tuple:
    if len(args) >= n:
        return args[:n]
    return args + (NIL,) * (n - len(args))


def _numbers(args: tuple, n: int) -> tuple:
    values = _operands(args, n)
    for v in values:
        if not is_number(v):
            raise StepperTypeError("expected number, got " + to_source(v))
    return tuple(float(v) for v in values)


def _truth(flag: bool) -> Term:
    return TRUE if flag else NIL


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return l + r

def sub(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return l - r

def mul(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return l * r

def div(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    if r == 0.0:
        # IEEE: x/0 is a signed infinity, 0/0 and nan/0 are nan
        if l == 0.0 or math.isnan(l):
            return math.nan
        return math.copysign(math.inf, l) * math.copysign(1.0, r)
    return l / r

def rem(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    # truncated remainder; result takes the dividend's sign
    if math.isnan(l) or math.isnan(r) or math.isinf(l) or r == 0.0:
        return math.nan
    return math.fmod(l, r)

def _is_odd_integer(x: float) -> bool:
    return x.is_integer() and math.fmod(x, 2.0) != 0.0

def pow_(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    if math.isnan(r) or (math.isinf(r) and abs(l) == 1.0):
        return math.nan
    if l == 0.0 and r < 0.0:
        return math.copysign(math.inf, l) if _is_odd_integer(r) else math.inf
    try:
        return math.pow(l, r)
    except OverflowError:
        return math.copysign(math.inf, l) if _is_odd_integer(r) else math.inf
    except ValueError:
        # negative base with a non-integral exponent
        return math.nan

# -------------------------------
# Bitwise (32-bit two's complement)
# -------------------------------
def _to_uint32(x: float) -> int:
    if math.isnan(x) or math.isinf(x):
        return 0
    return int(x) & 0xFFFFFFFF

def _to_int32(x: float) -> int:
    u = _to_uint32(x)
    return u - 0x100000000 if u & 0x80000000 else u

def _wrap_int32(i: int) -> int:
    i &= 0xFFFFFFFF
    return i - 0x100000000 if i & 0x80000000 else i

def band(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return float(_to_int32(l) & _to_int32(r))

def bor(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return float(_to_int32(l) | _to_int32(r))

def bxor(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return float(_to_int32(l) ^ _to_int32(r))

def bnot(args: tuple) -> Term:
    (v,) = _numbers(args, 1)
    return float(~_to_int32(v))

def shl(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return float(_wrap_int32(_to_int32(l) << (_to_uint32(r) & 31)))

def shr(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return float(_to_int32(l) >> (_to_uint32(r) & 31))

def shru(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return float(_to_uint32(l) >> (_to_uint32(r) & 31))

# -------------------------------
# Comparison
# -------------------------------
def eql(args: tuple) -> Term:
    l, r = _operands(args, 2)
    return _truth(equals(l, r))

def neq(args: tuple) -> Term:
    l, r = _operands(args, 2)
    return _truth(not equals(l, r))

def lt(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return _truth(l < r)

def lte(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return _truth(l <= r)

def gt(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return _truth(l > r)

def gte(args: tuple) -> Term:
    l, r = _numbers(args, 2)
    return _truth(l >= r)

# -------------------------------
# Boolean logic
# -------------------------------
def logical_not(args: tuple) -> Term:
    (v,) = _operands(args, 1)
    return _truth(is_nil(v))

# -------------------------------
# Pairs
# -------------------------------
def cons(args: tuple) -> Term:
    head, tail = _operands(args, 2)
    return (CONS, head, tail)

def _pair(args: tuple) -> tuple:
    (v,) = _operands(args, 1)
    if not is_cons(v):
        raise StepperTypeError("expected cons pair, got " + to_source(v))
    return v

def car(args: tuple) -> Term:
    return _pair(args)[1]

def cdr(args: tuple) -> Term:
    return _pair(args)[2]

# -------------------------------
# Introspection
# -------------------------------
def typeof(args: tuple) -> Term:
    (v,) = _operands(args, 1)
    if is_nil(v):
        kind = "nil"
    elif isinstance(v, tuple):
        kind = "symbol" if len(v) > 1 and v[0] == QUOTE and isinstance(v[1], Symbol) else "list"
    elif isinstance(v, Symbol):
        kind = "symbol"
    elif isinstance(v, Text):
        kind = "string"
    else:
        kind = "number"
    return (QUOTE, Symbol(kind))

# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[Symbol, BuiltinFn] = {
    Symbol('add'): add,
    Symbol('sub'): sub,
    Symbol('mul'): mul,
    Symbol('div'): div,
    Symbol('rem'): rem,
    Symbol('pow'): pow_,
    Symbol('band'): band,
    Symbol('bor'): bor,
    Symbol('bxor'): bxor,
    Symbol('bnot'): bnot,
    Symbol('shl'): shl,
    Symbol('shr'): shr,
    Symbol('shru'): shru,
    Symbol('eql'): eql,
    Symbol('neq'): neq,
    Symbol('lt'): lt,
    Symbol('lte'): lte,
    Symbol('gt'): gt,
    Symbol('gte'): gte,
    Symbol('not'): logical_not,
    Symbol('cons'): cons,
    Symbol('car'): car,
    Symbol('cdr'): cdr,
    Symbol('typeof'): typeof,
}


def is_builtin(term: Term) -> bool:
    return isinstance(term, Symbol) and term in BUILTINS
