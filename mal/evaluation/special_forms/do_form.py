from mal import EvaluatorFn
from mal import MalForm, MalValue
from mal.types.environment import Environment
from mal.types.nil import Nil


def do_form(
    tail: list[MalForm],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    result: MalValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
