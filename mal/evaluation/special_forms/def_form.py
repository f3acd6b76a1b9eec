from mal import EvaluatorFn
from mal import MalForm, MalValue
from mal.errors import MalArityError, MalInvalidSymbol
from mal.types.environment import Environment
from mal.types.symbol import Symbol


def def_form(
    tail: list[MalForm],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    """
    (def! name value)
    Binds in the current frame and returns the bound value. Nothing is bound
    if evaluating `value` fails.
    """
    if len(tail) != 2:
        raise MalArityError("def! requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MalInvalidSymbol(f"def! expects a symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    return env.set(name, value)
