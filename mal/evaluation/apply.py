"""Application engine for mal.

Closures get a fresh child of their captured environment with the arguments
bound; primitives are plain Python callables invoked as `fn(env, args)`.
"""

from __future__ import annotations

from typing import Callable

from mal import MalValue, EvaluatorFn
from mal.errors import MalTypeError
from mal.types.environment import Environment
from mal.types.lambda_fn import Lambda
from mal.types.kinds import kind_of


def apply(
    head: Lambda | Callable[[Environment, list[MalValue]], MalValue] | object,
    args: list[MalValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    """Apply either a Lambda or a primitive.

    - For Lambda, bind args in a child of the closure env and evaluate the body there.
    - For Python callables (builtins), invoke with the calling env and the list of args.
    - Otherwise, raise a type error.
    """
    if isinstance(head, Lambda):
        return evaluate_fn(head.body, head.extend_env(args))
    elif callable(head):
        return head(env, args)
    else:
        raise MalTypeError(f"Cannot apply non-function: expected function, got {kind_of(head)}")
