from __future__ import annotations


class BooleanType:
    """The `true` and `false` values.

    Kept apart from Python's bool so that `1` and `true` are different values
    and different map keys. Only the two module-level instances exist.
    """

    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def __repr__(self): return "true" if self.value else "false"
    def __bool__(self): return self.value


TRUE = BooleanType(True)
FALSE = BooleanType(False)


def to_boolean(flag: bool) -> BooleanType:
    """Map a Python truth value onto TRUE/FALSE."""
    return TRUE if flag else FALSE
