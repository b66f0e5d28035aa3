"""Render evaluated values back into tinyscheme source text."""

from __future__ import annotations

from io import StringIO

from tinyscheme import LispValue
from tinyscheme.errors import RecursionDepthError
from tinyscheme.types.novalue import NoValue
from tinyscheme.types.procedure import Primitive, Closure
from tinyscheme.types.symbol import Symbol

NO_OUTPUT = "[No output]"


def _write(value: LispValue, buffer: StringIO) -> None:
    # bool before int: True is an int in Python
    if isinstance(value, bool):
        buffer.write("#t" if value else "#f")
    elif isinstance(value, (int, Symbol)):
        buffer.write(str(value))
    elif value is NoValue:
        buffer.write(NO_OUTPUT)
    elif isinstance(value, list):
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    elif isinstance(value, Primitive):
        buffer.write(f"#<primitive {value.name}>")
    elif isinstance(value, Closure):
        buffer.write(f"#<procedure ({' '.join(str(f) for f in value.formals)})>")
    else:
        buffer.write(repr(value))


def stringify(value: LispValue) -> str:
    with StringIO() as buffer:
        try:
            _write(value, buffer)
        except RecursionError:
            raise RecursionDepthError("value nested too deeply to print") from None
        return buffer.getvalue()
