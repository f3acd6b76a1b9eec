from __future__ import annotations

from mal import MalValue
from mal.errors import MalArityError, MalInvalidSymbol, MalTypeError
from mal.types.environment import Environment
from mal.types.sequences import List, is_sequential
from mal.types.symbol import Symbol

VARIADIC_MARKER = Symbol("&")


def bind_arguments(
    formals: MalValue,
    supplied_args: list[MalValue],
    outer: Environment | None,
) -> Environment:
    """
    Bind positional arguments to a parameter list in a fresh child of `outer`.

    Supports:
    - Positional required parameters
    - `&` followed by one name, capturing the remaining arguments as a List

    Raises MalArityError when the counts do not line up, and MalInvalidSymbol
    when a parameter is not a Symbol.
    """
    if not is_sequential(formals):
        raise MalTypeError(f"Parameter list must be a list or vector, got {formals!r}")

    local_env = Environment(outer=outer)
    params = list(formals)
    supplied = list(supplied_args)

    for index, formal in enumerate(params):
        if formal == VARIADIC_MARKER:
            rest = params[index + 1:]
            if len(rest) != 1:
                raise MalArityError("Malformed parameter list: & must be followed by exactly one name")
            local_env.set(rest[0], List(supplied[index:]))
            return local_env
        if not isinstance(formal, Symbol):
            raise MalInvalidSymbol(f"Parameter {formal!r} is not a symbol")
        if index >= len(supplied):
            missing = [str(s) for s in params[index:]]
            raise MalArityError(
                f"Too few arguments; missing {len(missing)} parameter(s): {missing}"
            )
        local_env.set(formal, supplied[index])

    if len(supplied) > len(params):
        raise MalArityError(f"Too many arguments: expected {len(params)}, got {len(supplied)}")

    return local_env
