from __future__ import annotations

from weakref import WeakValueDictionary


class Symbol:
    """An interned identifier: ``Symbol("x") is Symbol("x")`` holds.

    Interning lets the evaluator compare head symbols and hash frame keys by
    identity. The table holds symbols weakly, so names no longer referenced
    by any form, frame or value are released.
    """

    __slots__ = ("name", "__weakref__")

    _table: WeakValueDictionary[str, Symbol] = WeakValueDictionary()

    def __new__(cls, name: str) -> Symbol:
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.name = name
            cls._table[name] = sym
        return sym

    def __reduce__(self):
        return Symbol, (self.name,)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
