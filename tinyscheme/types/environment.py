"""Runtime environment for tinyscheme.

An Environment is one scope frame: a mapping of Symbols to evaluated values plus
an `outer` link. Frames chain outward to the global frame, whose outer link is
absent. Frames are shared by reference, so a closure holding a frame sees later
`define`/`set!` mutations made through any other holder.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from tinyscheme import LispValue
from tinyscheme.errors import SchemeSyntaxError, UnboundSymbolError
from tinyscheme.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        bindings: dict[Symbol, LispValue] | None = None,
        outer: Optional[Environment] = None,
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        if bindings:
            self.update(bindings)

    def find(self, symbol: Symbol) -> Environment:
        """Return the nearest frame in the chain (self first) that binds `symbol`.

        Raises UnboundSymbolError once the global frame has been searched.
        """
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        raise UnboundSymbolError(symbol)

    def get(self, symbol: Symbol) -> LispValue:
        """Value bound to `symbol` in this frame only; callers locate the frame with find()."""
        return self.vars[symbol]

    def set(self, symbol: Symbol, value: LispValue) -> None:
        """Create or overwrite the binding for `symbol` in this frame only."""
        if not isinstance(symbol, Symbol):
            raise SchemeSyntaxError(f"Cannot bind {symbol!r}: not a symbol")
        self.vars[symbol] = value

    def lookup(self, symbol: Symbol) -> LispValue:
        return self.find(symbol).get(symbol)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-bind a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def __contains__(self, symbol: Symbol) -> bool:
        try:
            self.find(symbol)
        except UnboundSymbolError:
            return False
        return True

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging, innermost frame first."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buffer:
                env._write_vars(buffer)
                chain.append(buffer.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
