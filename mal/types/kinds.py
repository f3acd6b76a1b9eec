from __future__ import annotations

from mal import MalValue
from mal.types.boolean import BooleanType
from mal.types.hash_map import HashMap
from mal.types.lambda_fn import Lambda
from mal.types.nil import NilType
from mal.types.sequences import List, Vector
from mal.types.symbol import Keyword, Symbol


def kind_of(value: MalValue) -> str:
    """Name of a value's tag, for error messages."""
    match value:
        case List():
            return "list"
        case Vector():
            return "vector"
        case HashMap():
            return "map"
        case Symbol():
            return "symbol"
        case Keyword():
            return "keyword"
        case str():
            return "string"
        case int():
            return "integer"
        case BooleanType():
            return "boolean"
        case NilType():
            return "nil"
        case Lambda():
            return "function"
    if callable(value):
        return "function"
    return type(value).__name__


def is_integer(value: MalValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# Integers are signed 64-bit; arithmetic wraps like two's complement.
INT_BITS = 64
INT_MIN = -(1 << (INT_BITS - 1))
INT_MAX = (1 << (INT_BITS - 1)) - 1


def in_int_range(n: int) -> bool:
    return INT_MIN <= n <= INT_MAX


def wrap_int(n: int) -> int:
    """Reduce `n` to the signed 64-bit range."""
    n &= (1 << INT_BITS) - 1
    return n - (1 << INT_BITS) if n > INT_MAX else n
