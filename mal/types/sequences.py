"""Immutable sequence values.

Both are tuples, so a List and a Vector with pairwise-equal elements compare
equal and hash alike, while `isinstance` still tells them apart.
"""

from __future__ import annotations


class List(tuple):
    """Parenthesised sequence `(a b c)`."""

    __slots__ = ()

    def __repr__(self):
        return f"List({tuple.__repr__(self)})"


class Vector(tuple):
    """Bracketed sequence `[a b c]`."""

    __slots__ = ()

    def __repr__(self):
        return f"Vector({tuple.__repr__(self)})"


def is_sequential(value) -> bool:
    return isinstance(value, (List, Vector))
