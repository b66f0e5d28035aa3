from tinyscheme import EvaluatorFn
from tinyscheme import SExpression, LispValue
from tinyscheme.errors import SchemeSyntaxError, ArityError
from tinyscheme.types.environment import Environment
from tinyscheme.types.novalue import NoValue
from tinyscheme.types.symbol import Symbol


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (set! name value)
    Overwrites the binding in the frame that owns `name`; never creates one.
    """
    if len(tail) != 2:
        raise ArityError(2, len(tail), "set!")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise SchemeSyntaxError(f"set! target must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.find(var_sym).set(var_sym, value)
    return NoValue
