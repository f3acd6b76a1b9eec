"""Render values back to text.

`print_readably=True` produces text the reader turns back into an equal value
(strings quoted and escaped); `False` is the display form used by `str` and
`println` (strings verbatim).
"""

from __future__ import annotations

from mal import MalValue
from mal.errors import MalTypeError
from mal.types.boolean import BooleanType
from mal.types.hash_map import HashMap
from mal.types.lambda_fn import Lambda
from mal.types.nil import NilType
from mal.types.sequences import List, Vector
from mal.types.symbol import Keyword, Symbol


def escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def pr_str(value: MalValue, print_readably: bool = True) -> str:
    match value:
        case List():
            return "(" + _join(value, print_readably) + ")"
        case Vector():
            return "[" + _join(value, print_readably) + "]"
        case HashMap():
            parts = []
            for k, v in value.items():
                parts.append(pr_str(k, print_readably))
                parts.append(pr_str(v, print_readably))
            return "{" + " ".join(parts) + "}"
        case str():
            return f'"{escape(value)}"' if print_readably else value
        case int():
            return str(value)
        case Symbol() | Keyword():
            return str(value)
        case NilType() | BooleanType():
            return repr(value)
        case Lambda():
            return "#<function>"
        case _ if callable(value):
            return "#<function>"
    raise MalTypeError(f"Cannot print value of type {type(value).__name__}")


def _join(items, print_readably: bool) -> str:
    return " ".join(pr_str(x, print_readably) for x in items)
