"""Core evaluator for the tinyscheme interpreter.

A plain recursive tree walk: symbols are looked up, other atoms evaluate to
themselves, special forms dispatch through SPECIAL_FORMS, and every other list
is a procedure application.
"""

from __future__ import annotations

import logging

from tinyscheme import SExpression, LispValue
from tinyscheme.errors import NotCallableError, RecursionDepthError
from tinyscheme.types.environment import Environment
from tinyscheme.types.symbol import Symbol
from tinyscheme.evaluation.apply import apply
from tinyscheme.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Evaluate `expr` in `env`. Exhausting the host stack is reported as
    RecursionDepthError; frames already mutated keep their bindings.
    """
    try:
        return evaluate0(expr, env)
    except RecursionError:
        raise RecursionDepthError("maximum recursion depth exceeded during evaluation") from None


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.find(expr).get(expr)

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            logger.debug("special form %s", head)
            return SPECIAL_FORMS[head](tail, env, evaluate0)

        case [_, *_]:
            proc, *args = [evaluate0(e, env) for e in expr]
            return apply(proc, args, evaluate0)

        case []:
            raise NotCallableError(expr)

    # --- Atoms return as-is ---
    return expr
