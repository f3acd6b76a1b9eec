from mal import EvaluatorFn
from mal import MalForm, MalValue
from mal.errors import MalArityError
from mal.types.boolean import FALSE
from mal.types.environment import Environment
from mal.types.nil import Nil


def if_form(
    tail: list[MalForm],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    if not 2 <= len(tail) <= 3:
        raise MalArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)
    # only nil and false are falsy; 0 and empty collections are true
    if cond is not Nil and cond is not FALSE:
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
