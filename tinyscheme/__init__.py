# Core type aliases for tinyscheme's data model.
# We use plain Python types (int, bool, list) plus Symbol to represent both code
# (forms) and runtime values. There is no Cons type: an ordered sequence is a list.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; they are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type, handed to special forms and the application engine
EvaluatorFn = Callable[..., LispValue]

# Public surface. Imported after the aliases above, which submodules rely on.
from tinyscheme.errors import (  # noqa: E402
    SchemeError,
    SchemeSyntaxError,
    UnboundSymbolError,
    ArityError,
    NotCallableError,
    SchemeTypeError,
    DivisionByZeroError,
    RecursionDepthError,
)
from tinyscheme.types.symbol import Symbol  # noqa: E402
from tinyscheme.types.novalue import NoValue  # noqa: E402
from tinyscheme.types.environment import Environment  # noqa: E402
from tinyscheme.types.procedure import Procedure, Primitive, Closure  # noqa: E402
from tinyscheme.reader.parser import tokenize, atom, parse, parse_all  # noqa: E402
from tinyscheme.evaluation.evaluator import evaluate  # noqa: E402
from tinyscheme.builtin.env_builtin import standard_env  # noqa: E402
from tinyscheme.printer import stringify  # noqa: E402

_default_env: Environment | None = None


def run(text: str, env: Environment | None = None) -> str:
    """Parse the first form of `text`, evaluate it and return its printed form.

    Without `env`, a global environment is built on first use and shared by
    later calls.
    """
    global _default_env
    if env is None:
        if _default_env is None:
            _default_env = standard_env()
        env = _default_env
    return stringify(evaluate(parse(text), env))


__all__ = [
    "LispValue",
    "SExpression",
    "EvaluatorFn",
    "SchemeError",
    "SchemeSyntaxError",
    "UnboundSymbolError",
    "ArityError",
    "NotCallableError",
    "SchemeTypeError",
    "DivisionByZeroError",
    "RecursionDepthError",
    "Symbol",
    "NoValue",
    "Environment",
    "Procedure",
    "Primitive",
    "Closure",
    "tokenize",
    "atom",
    "parse",
    "parse_all",
    "evaluate",
    "standard_env",
    "stringify",
    "run",
]
