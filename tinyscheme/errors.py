from __future__ import annotations


class SchemeError(Exception):
    """ Base class for all tinyscheme errors"""
    pass


class SchemeSyntaxError(SchemeError):
    """ Raised when the token stream or a special form is malformed"""


class UnboundSymbolError(SchemeError):
    """ Raised when a symbol is looked up or assigned before it is bound"""

    def __init__(self, symbol):
        super().__init__(f"{symbol} is undefined")
        self.symbol = str(symbol)


class ArityError(SchemeError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, expected: int, received: int, name: str | None = None):
        what = f"{name}: " if name else ""
        super().__init__(
            f"{what}argument length mismatch, expected {expected} but received {received}"
        )
        self.expected = expected
        self.received = received
        self.name = name


class NotCallableError(SchemeError):
    """ Raised when the head of an application is not a procedure"""

    def __init__(self, value):
        super().__init__(f"Cannot apply non-procedure {value!r}")
        self.value = value


class SchemeTypeError(SchemeError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""


class DivisionByZeroError(SchemeError):
    """ Raised on integer division by zero"""


class RecursionDepthError(SchemeError):
    """ Raised when evaluation exhausts the host call stack"""
