"""Procedure values: native primitives and user-defined closures."""

from __future__ import annotations

from typing import Callable

from tinyscheme import SExpression, LispValue
from tinyscheme.errors import ArityError, SchemeTypeError, DivisionByZeroError
from tinyscheme.types.environment import Environment
from tinyscheme.types.symbol import Symbol


class Procedure:
    """Base class for anything that may sit in the head of an application."""

    __slots__ = ()


class Primitive(Procedure):
    """A native operation with a required arity (None means variadic)."""

    __slots__ = ("name", "fn", "arity")

    def __init__(self, name: str, fn: Callable[..., LispValue], arity: int | None):
        self.name = name
        self.fn = fn
        self.arity = arity

    def __call__(self, args: list[LispValue]) -> LispValue:
        if self.arity is not None and len(args) != self.arity:
            raise ArityError(self.arity, len(args), self.name)
        try:
            return self.fn(*args)
        except ZeroDivisionError:
            raise DivisionByZeroError(f"{self.name}: division by zero") from None
        except TypeError as ex:
            raise SchemeTypeError(f"{self.name}: {ex}") from ex

    def __repr__(self) -> str:
        return f"<Primitive {self.name}/{'*' if self.arity is None else self.arity}>"


class Closure(Procedure):
    """A first-class lambda with formal parameters, body, and captured env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Captured by reference, never copied
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.formals)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind `args` positionally to the formals in a new child of the captured frame."""
        if len(args) != self.arity:
            raise ArityError(self.arity, len(args), "lambda")
        return Environment(dict(zip(self.formals, args)), outer=self.env)

    def __repr__(self) -> str:
        return f"<Closure ({' '.join(str(f) for f in self.formals)})>"
