from tinyscheme import EvaluatorFn
from tinyscheme import SExpression, LispValue
from tinyscheme.errors import SchemeSyntaxError, ArityError
from tinyscheme.types.environment import Environment
from tinyscheme.types.novalue import NoValue
from tinyscheme.types.symbol import Symbol


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Binds in the current frame, shadowing any outer binding of the same name.
    """
    if len(tail) != 2:
        raise ArityError(2, len(tail), "define")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise SchemeSyntaxError(f"define target must be a symbol, got {name!r}")
    env.set(name, evaluate_fn(val_expr, env))
    return NoValue
