"""Built-in functions for the mal runtime environment.

Arithmetic, comparison, list introspection and printing primitives. Every
primitive is a plain function called as `fn(env, args)` with already-evaluated
arguments. `core_namespace()` builds the table; `register(env)` installs it.
"""
from __future__ import annotations

from typing import Callable

from mal import MalValue
from mal.errors import MalArityError, MalTypeError, MalZeroDivisionError
from mal.printer import pr_str
from mal.types.boolean import BooleanType, to_boolean
from mal.types.environment import Environment
from mal.types.hash_map import HashMap
from mal.types.kinds import is_integer, kind_of, wrap_int
from mal.types.nil import Nil
from mal.types.sequences import List, is_sequential
from mal.types.symbol import Symbol

Primitive = Callable[[Environment, list[MalValue]], MalValue]


def is_equal(a: MalValue, b: MalValue) -> bool:
    """Structural equality.

    Lists and vectors compare element-wise regardless of tag, maps compare by
    key set and value, atoms compare by tag then value.
    """
    if a is b:
        return True
    if is_sequential(a) and is_sequential(b):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, HashMap) and isinstance(b, HashMap):
        if a.keys() != b.keys():
            return False
        return all(is_equal(a[k], b[k]) for k in a)
    if type(a) != type(b):
        return False
    return a == b


def _check_arity(name: str, args: list[MalValue], minimum: int, maximum: int | None = None) -> None:
    if len(args) < minimum or (maximum is not None and len(args) > maximum):
        if maximum == minimum:
            expected = f"exactly {minimum}"
        elif maximum is None:
            expected = f"at least {minimum}"
        else:
            expected = f"{minimum} to {maximum}"
        raise MalArityError(f"{name} requires {expected} argument(s), got {len(args)}")


def _integers(name: str, args: list[MalValue]) -> list[int]:
    for x in args:
        if not is_integer(x):
            raise MalTypeError(f"All arguments to {name} must be integers, got {kind_of(x)}")
    return args


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[MalValue]) -> int:
    """Return the sum of all arguments, wrapped to 64 bits."""
    return wrap_int(sum(_integers("+", args)))


def sub(env: Environment, args: list[MalValue]) -> int:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    _check_arity("-", args, 1)
    first, *rest = _integers("-", args)
    if not rest:
        return wrap_int(-first)
    for x in rest:
        first = wrap_int(first - x)
    return first


def mul(env: Environment, args: list[MalValue]) -> int:
    """Return the product of all arguments, wrapped to 64 bits."""
    result = 1
    for x in _integers("*", args):
        result = wrap_int(result * x)
    return result


def div(env: Environment, args: list[MalValue]) -> int:
    """Divide left-to-right, truncating toward zero."""
    _check_arity("/", args, 2)
    result, *rest = _integers("/", args)
    for x in rest:
        if x == 0:
            raise MalZeroDivisionError("Division by zero")
        quotient = abs(result) // abs(x)
        # INT_MIN / -1 wraps back to INT_MIN
        result = wrap_int(quotient if (result < 0) == (x < 0) else -quotient)
    return result


# -------------------------------
# Comparison
# -------------------------------
def equals(env: Environment, args: list[MalValue]) -> BooleanType:
    _check_arity("=", args, 2, 2)
    return to_boolean(is_equal(args[0], args[1]))


def _integer_pair(name: str, args: list[MalValue]) -> tuple[int, int]:
    _check_arity(name, args, 2, 2)
    a, b = _integers(name, args)
    return a, b


def lt(env: Environment, args: list[MalValue]) -> BooleanType:
    a, b = _integer_pair("<", args)
    return to_boolean(a < b)


def lte(env: Environment, args: list[MalValue]) -> BooleanType:
    a, b = _integer_pair("<=", args)
    return to_boolean(a <= b)


def gt(env: Environment, args: list[MalValue]) -> BooleanType:
    a, b = _integer_pair(">", args)
    return to_boolean(a > b)


def gte(env: Environment, args: list[MalValue]) -> BooleanType:
    a, b = _integer_pair(">=", args)
    return to_boolean(a >= b)


# -------------------------------
# Lists
# -------------------------------
def list_builtin(env: Environment, args: list[MalValue]) -> List:
    """Return a new list of the arguments."""
    return List(args)


def is_list(env: Environment, args: list[MalValue]) -> BooleanType:
    """True only for lists; vectors are not lists."""
    _check_arity("list?", args, 1, 1)
    return to_boolean(isinstance(args[0], List))


def is_empty(env: Environment, args: list[MalValue]) -> BooleanType:
    _check_arity("empty?", args, 1, 1)
    xs = args[0]
    if xs is Nil:
        return to_boolean(True)
    if is_sequential(xs) or isinstance(xs, HashMap):
        return to_boolean(len(xs) == 0)
    raise MalTypeError(f"empty? expects a sequence, got {kind_of(xs)}")


def count(env: Environment, args: list[MalValue]) -> int:
    """Number of elements; nil counts as 0."""
    _check_arity("count", args, 1, 1)
    xs = args[0]
    if xs is Nil:
        return 0
    if is_sequential(xs) or isinstance(xs, (HashMap, str)):
        return len(xs)
    raise MalTypeError(f"count expects a sequence, got {kind_of(xs)}")


# -------------------------------
# Printing
# -------------------------------
def pr_str_builtin(env: Environment, args: list[MalValue]) -> str:
    """Readable renderings joined by single spaces."""
    return " ".join(pr_str(a, True) for a in args)


def str_builtin(env: Environment, args: list[MalValue]) -> str:
    """Display renderings concatenated with no separator."""
    return "".join(pr_str(a, False) for a in args)


def prn(env: Environment, args: list[MalValue]) -> MalValue:
    """Print readable renderings joined by spaces followed by newline; returns Nil."""
    print(" ".join(pr_str(a, True) for a in args))
    return Nil


def println(env: Environment, args: list[MalValue]) -> MalValue:
    """Print display renderings joined by spaces followed by newline; returns Nil."""
    print(" ".join(pr_str(a, False) for a in args))
    return Nil


def core_namespace() -> dict[Symbol, Primitive]:
    """The fixed table of primitives installed in every top-level environment."""
    return {
        Symbol("+"): add,
        Symbol("-"): sub,
        Symbol("*"): mul,
        Symbol("/"): div,
        Symbol("="): equals,
        Symbol("<"): lt,
        Symbol("<="): lte,
        Symbol(">"): gt,
        Symbol(">="): gte,
        Symbol("list"): list_builtin,
        Symbol("list?"): is_list,
        Symbol("empty?"): is_empty,
        Symbol("count"): count,
        Symbol("pr-str"): pr_str_builtin,
        Symbol("str"): str_builtin,
        Symbol("prn"): prn,
        Symbol("println"): println,
    }


def register(env: Environment) -> None:
    """Register all builtin functions into the given environment."""
    env.update(core_namespace())
