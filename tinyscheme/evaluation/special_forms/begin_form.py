from tinyscheme import EvaluatorFn
from tinyscheme import SExpression, LispValue
from tinyscheme.types.environment import Environment
from tinyscheme.types.novalue import NoValue


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = NoValue
    for e in tail:
        result = evaluate_fn(e, env)
    return result
