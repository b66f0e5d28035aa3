"""Built-in procedures for the tinyscheme global environment.

This module defines the fixed primitive table (arithmetic, comparison, list
processing and predicates) and the constructor for the global environment.
Every primitive is a plain Python function wrapped in a Primitive that
enforces its arity before the function runs.
"""
from __future__ import annotations

from tinyscheme import LispValue
from tinyscheme.errors import SchemeTypeError
from tinyscheme.evaluation.special_forms import is_true
from tinyscheme.types.environment import Environment
from tinyscheme.types.novalue import NoValue
from tinyscheme.types.procedure import Primitive
from tinyscheme.types.symbol import Symbol


def _require_int(name: str, *operands: LispValue) -> None:
    for x in operands:
        # bool is an int subclass in Python but not a number here
        if not isinstance(x, int) or isinstance(x, bool):
            raise SchemeTypeError(f"{name}: expected integer operands, got {x!r}")


def _require_list(name: str, x: LispValue) -> list:
    if not isinstance(x, list):
        raise SchemeTypeError(f"{name}: expected a list, got {x!r}")
    return x


# -------------------------------
# Arithmetic
# -------------------------------
def add(a, b):
    _require_int("+", a, b)
    return a + b


def sub(a, b):
    _require_int("-", a, b)
    return a - b


def mul(a, b):
    _require_int("*", a, b)
    return a * b


def div(a, b):
    # Integer-only numerics: floor division
    _require_int("/", a, b)
    return a // b


# -------------------------------
# Equality and comparison
# -------------------------------
def equals(a, b) -> bool:
    """Single value equality shared by =, eq? and equal?."""
    return a == b


def lt(a, b) -> bool:
    return a < b


def gt(a, b) -> bool:
    return a > b


def lte(a, b) -> bool:
    return a <= b


def gte(a, b) -> bool:
    return a >= b


def logical_not(x) -> bool:
    return not is_true(x)


# -------------------------------
# List operations
# -------------------------------
def length(xs) -> int:
    return len(_require_list("length", xs))


def cons(x, y) -> list:
    """Prepend x onto y; list operands are spliced, so (cons 1 2) is (1 2)."""
    head = x if isinstance(x, list) else [x]
    tail = y if isinstance(y, list) else [y]
    return head + tail


def car(xs):
    xs = _require_list("car", xs)
    return xs[0] if xs else NoValue


def cdr(xs) -> list:
    return _require_list("cdr", xs)[1:]


def list_builtin(*items) -> list:
    return list(items)


# -------------------------------
# Predicates
# -------------------------------
def is_list(x) -> bool:
    return isinstance(x, list)


def is_null(x) -> bool:
    return isinstance(x, list) and not x


def is_symbol(x) -> bool:
    return isinstance(x, Symbol)


PRIMITIVES: list[tuple[str, object, int | None]] = [
    ("+", add, 2),
    ("-", sub, 2),
    ("*", mul, 2),
    ("/", div, 2),
    ("not", logical_not, 1),
    ("=", equals, 2),
    ("eq?", equals, 2),
    ("equal?", equals, 2),
    ("<", lt, 2),
    (">", gt, 2),
    ("<=", lte, 2),
    (">=", gte, 2),
    ("length", length, 1),
    ("cons", cons, 2),
    ("car", car, 1),
    ("cdr", cdr, 1),
    ("list", list_builtin, None),
    ("list?", is_list, 1),
    ("null?", is_null, 1),
    ("symbol?", is_symbol, 1),
]


# -------------------------------
# Registration
# -------------------------------
def register(env: Environment) -> None:
    env.update({Symbol(name): Primitive(name, fn, arity) for name, fn, arity in PRIMITIVES})


def standard_env() -> Environment:
    """Build a fresh global environment holding every primitive."""
    env = Environment()
    register(env)
    return env
