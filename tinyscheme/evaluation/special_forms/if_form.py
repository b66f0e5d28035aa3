from tinyscheme import EvaluatorFn
from tinyscheme import SExpression, LispValue
from tinyscheme.errors import ArityError
from tinyscheme.types.environment import Environment
from tinyscheme.types.novalue import NoValue


def is_true(value: LispValue) -> bool:
    # Only #f and the no-value result are false; 0 and () are true.
    return value is not False and value is not NoValue


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise ArityError(3, len(tail), "if")

    if is_true(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return NoValue
