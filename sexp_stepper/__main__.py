"""Command-line stepper.

    python -m sexp_stepper program.lisp --trace
    python -m sexp_stepper -e "(add 2 3)"
    python -m sexp_stepper --example factorial --pretty
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from sexp_stepper.errors import StepperError, StepperSyntaxError
from sexp_stepper.examples import EXAMPLES, get_example
from sexp_stepper.printer import pretty, to_source
from sexp_stepper.session import Session

EXIT_ERROR = 1
EXIT_USAGE = 2
EXIT_STEP_LIMIT = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sexp_stepper",
        description="Reduce a program one rewrite at a time.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", help="program file, or - for stdin")
    source.add_argument("-e", "--expr", help="program text")
    source.add_argument("--example", choices=sorted(EXAMPLES), help="run a bundled example")
    parser.add_argument("--max-steps", type=int, default=None, help="stop after N steps")
    parser.add_argument("--trace", action="store_true", help="print every intermediate state")
    parser.add_argument("--pretty", action="store_true", help="pretty-print states")
    parser.add_argument("--width", type=int, default=None, help="line width for --pretty")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _read_source(args: argparse.Namespace) -> str:
    if args.expr is not None:
        return args.expr
    if args.example is not None:
        return get_example(args.example).source
    if args.file == "-":
        return sys.stdin.read()
    return Path(args.file).read_text(encoding="utf-8")


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    def render(term) -> str:
        return pretty(term, width=args.width) if args.pretty else to_source(term)

    try:
        source = _read_source(args)
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    try:
        session = Session(source)
    except StepperSyntaxError as e:
        print(f"syntax error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.trace:
        print(f"[0] {render(session.current)}")
    try:
        for term in session.iter_steps(args.max_steps):
            if args.trace:
                print(f"[{session.index}] {render(term)}")
    except StepperError as e:
        print(f"error at step {session.index + 1}: {e}", file=sys.stderr)
        print(render(session.current), file=sys.stderr)
        return EXIT_ERROR

    if not args.trace:
        print(render(session.current))
    if session.can_forward:
        print(f"stopped after {session.index} steps without reaching normal form", file=sys.stderr)
        return EXIT_STEP_LIMIT
    return 0


if __name__ == "__main__":
    sys.exit(main())
