from __future__ import annotations


class NoValueType:
    """Result of forms evaluated only for effect (define, set!, empty begin)."""

    _instance: NoValueType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "NoValue"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NoValueType)

    def __hash__(self):
        return hash(NoValueType)


NoValue = NoValueType()
