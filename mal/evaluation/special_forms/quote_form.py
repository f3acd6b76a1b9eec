from mal import EvaluatorFn
from mal import MalForm, MalValue
from mal.errors import MalArityError
from mal.types.environment import Environment


def quote_form(
    tail: list[MalForm],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    """(quote x) returns x unevaluated."""
    if len(tail) != 1:
        raise MalArityError("quote requires exactly 1 argument")
    return tail[0]
