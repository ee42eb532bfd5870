from __future__ import annotations
import os


# Defaults
_DEFAULT_MAX_HISTORY = 10000
_DEFAULT_PRINT_WIDTH = 60
_DEFAULT_TAB_WIDTH = 2


def int_from_env(var: str, default: int, minimum: int = 0) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value >= minimum else default


def get_max_history() -> int:
    return int_from_env('SEXP_STEPPER_MAX_HISTORY', _DEFAULT_MAX_HISTORY)


def get_print_width() -> int:
    return int_from_env('SEXP_STEPPER_PRINT_WIDTH', _DEFAULT_PRINT_WIDTH, minimum=1)


def get_tab_width() -> int:
    return int_from_env('SEXP_STEPPER_TAB_WIDTH', _DEFAULT_TAB_WIDTH)
