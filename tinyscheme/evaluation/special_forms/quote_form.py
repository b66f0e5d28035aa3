from tinyscheme import SExpression, LispValue, EvaluatorFn
from tinyscheme.errors import ArityError
from tinyscheme.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise ArityError(1, len(tail), "quote")
    return tail[0]
