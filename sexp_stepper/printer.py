"""
  Term printer

- to_source: single-line rendering that the reader accepts back.
- pretty: width-aware layout built from a small document algebra
  (text, Group, Indent, LINE, SOFTLINE). A group is printed flat when it
  fits in the remaining width, otherwise its lines break at the current
  indentation.

    - symbols -> their name
    - text -> JSON string literal
    - numbers -> shortest form, integral values without a fraction
    - (quote X) -> 'X
    - lists -> (a b c)
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Union

from sexp_stepper import Term
from sexp_stepper import config
from sexp_stepper.types.symbol import Symbol, QUOTE
from sexp_stepper.types.text import Text
from sexp_stepper.types.predicates import is_number

_EXPONENT_RE = re.compile(r"e([+-])0*(\d)")


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    value = float(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" in text and abs(value) >= 1e-6:
        # plain decimals down to 1e-6
        return format(Decimal(text), "f")
    # 1e-07 -> 1e-7, 1e+21 stays as is
    return _EXPONENT_RE.sub(r"e\1\2", text)


def to_source(term: Term) -> str:
    if isinstance(term, Symbol):
        return term.name
    if isinstance(term, Text):
        return json.dumps(term.value, ensure_ascii=False)
    if is_number(term):
        return format_number(term)
    if isinstance(term, tuple):
        if term and term[0] == QUOTE:
            return "'" + to_source(term[1] if len(term) > 1 else ())
        return "(" + " ".join(to_source(t) for t in term) + ")"
    raise TypeError(f"not a term: {term!r}")


# ----------------- Document algebra -----------------
@dataclass(frozen=True)
class Group:
    contents: "Doc"


@dataclass(frozen=True)
class Indent:
    contents: "Doc"


@dataclass(frozen=True)
class Line:
    # soft lines vanish in flat mode, hard ones become a space
    soft: bool = False


Doc = Union[str, list, Group, Indent, Line]

LINE = Line()
SOFTLINE = Line(soft=True)

_FLAT = "flat"
_BREAK = "break"

SPECIAL_FORMS = {"lambda", "let", "if"}


def join(separator: Doc, docs: list[Doc]) -> list[Doc]:
    parts: list[Doc] = []
    for i, d in enumerate(docs):
        if i:
            parts.append(separator)
        parts.append(d)
    return parts


def build_doc(term: Term) -> Doc:
    if not isinstance(term, tuple):
        return to_source(term)

    if term and term[0] == QUOTE:
        return ["'", build_doc(term[1] if len(term) > 1 else ())]

    if not term:
        return "()"

    head = build_doc(term[0])
    rest = term[1:]
    if not rest:
        return Group(["(", head, ")"])

    if isinstance(term[0], Symbol) and term[0].name in SPECIAL_FORMS:
        return Group([
            "(",
            Group([head, " ", SOFTLINE, build_doc(rest[0])]),
            Indent([LINE, join(LINE, [build_doc(t) for t in rest[1:]])]),
            ")",
        ])

    return Group([
        "(",
        head,
        Indent([LINE, join(LINE, [build_doc(t) for t in rest])]),
        ")",
    ])


def _fits(next_cmd: tuple, rest: list[tuple], width: int) -> bool:
    """Whether `next_cmd` printed flat, plus whatever follows it up to the
    next breaking line, stays within `width` columns."""
    cmds = [next_cmd]
    rest_index = len(rest)
    while width >= 0:
        if not cmds:
            if rest_index == 0:
                return True
            rest_index -= 1
            cmds.append(rest[rest_index])
            continue
        ind, mode, doc = cmds.pop()
        if isinstance(doc, str):
            width -= len(doc)
        elif isinstance(doc, list):
            for part in reversed(doc):
                cmds.append((ind, mode, part))
        elif isinstance(doc, (Group, Indent)):
            cmds.append((ind, mode, doc.contents))
        elif isinstance(doc, Line):
            if mode == _BREAK:
                return True
            if not doc.soft:
                width -= 1
    return False


def render(doc: Doc, width: int, tab_width: int) -> str:
    out: list[str] = []
    pos = 0
    stack: list[tuple] = [(0, _BREAK, doc)]
    while stack:
        ind, mode, d = stack.pop()
        if isinstance(d, str):
            out.append(d)
            pos += len(d)
        elif isinstance(d, list):
            for part in reversed(d):
                stack.append((ind, mode, part))
        elif isinstance(d, Indent):
            stack.append((ind + tab_width, mode, d.contents))
        elif isinstance(d, Group):
            if mode == _FLAT:
                stack.append((ind, _FLAT, d.contents))
            else:
                flat = (ind, _FLAT, d.contents)
                stack.append(flat if _fits(flat, stack, width - pos) else (ind, _BREAK, d.contents))
        elif isinstance(d, Line):
            if mode == _FLAT:
                if not d.soft:
                    out.append(" ")
                    pos += 1
            else:
                out.append("\n" + " " * ind)
                pos = ind
    return "\n".join(line.rstrip() for line in "".join(out).split("\n"))


def pretty(term: Term, width: Optional[int] = None, tab_width: Optional[int] = None) -> str:
    if width is None:
        width = config.get_print_width()
    if tab_width is None:
        tab_width = config.get_tab_width()
    return render(build_doc(term), width, tab_width)
