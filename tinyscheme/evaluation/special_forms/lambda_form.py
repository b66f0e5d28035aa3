import logging

from tinyscheme import EvaluatorFn
from tinyscheme import SExpression, LispValue
from tinyscheme.errors import SchemeSyntaxError, ArityError
from tinyscheme.types.environment import Environment
from tinyscheme.types.procedure import Closure
from tinyscheme.types.symbol import Symbol

logger = logging.getLogger(__name__)

BEGIN = Symbol("begin")


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body...): several body forms are an implicit begin.
    if len(tail) < 2:
        raise ArityError(2, len(tail), "lambda")

    params, *body_forms = tail
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise SchemeSyntaxError(f"lambda parameters must be a list of symbols, got {params!r}")

    if len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = [BEGIN, *body_forms]

    logger.debug("closure over %d formal(s)", len(params))
    return Closure(list(params), body, env)
