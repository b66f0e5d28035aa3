"""Application engine for tinyscheme.

Centralizes procedure application for the evaluator:
- Primitives check their arity and run the native operation.
- Closures bind arguments in a fresh child of their captured frame and
  evaluate the body there.
Anything else in head position is not callable.
"""

import logging

from tinyscheme import LispValue, EvaluatorFn
from tinyscheme.errors import NotCallableError
from tinyscheme.types.procedure import Primitive, Closure

logger = logging.getLogger(__name__)


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Closure; extend_env raises ArityError on a count mismatch."""
    new_env = fn.extend_env(args)
    logger.debug("apply %r to %d argument(s)", fn, len(args))
    return evaluate_fn(fn.body, new_env)


def apply(head: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Primitive):
        return head(args)
    else:
        raise NotCallableError(head)
