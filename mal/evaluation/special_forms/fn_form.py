from mal import EvaluatorFn
from mal import MalForm, MalValue
from mal.errors import MalArityError, MalSyntaxError
from mal.types.environment import Environment
from mal.types.lambda_fn import Lambda
from mal.types.nil import Nil
from mal.types.sequences import List, is_sequential
from mal.types.symbol import Symbol


def fn_form(
    tail: list[MalForm],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    # (fn* (params) body) captures `env` without evaluating anything.
    # Several body forms run as an implicit do; no body returns nil.
    if not tail:
        raise MalArityError("fn* requires at least a parameter list")

    params = tail[0]
    if not is_sequential(params):
        raise MalSyntaxError(f"fn* parameters must be a list or vector, got {params!r}")
    body_forms = tail[1:]

    if not body_forms:
        body = Nil
    elif len(body_forms) == 1:
        body = body_forms[0]
    else:
        body = List((Symbol("do"), *body_forms))

    return Lambda(params, body, env)
