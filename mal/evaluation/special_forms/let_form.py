from mal import EvaluatorFn
from mal import MalForm, MalValue
from mal.errors import MalArityError, MalInvalidSymbol, MalSyntaxError
from mal.types.environment import Environment
from mal.types.sequences import is_sequential
from mal.types.symbol import Symbol


def let_form(
    tail: list[MalForm],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> MalValue:
    """
    (let* (name1 expr1 name2 expr2 ...) body)
    Each expr is evaluated in the new scope, so later bindings see earlier ones.
    """
    if len(tail) != 2:
        raise MalArityError("let* requires a binding list and a body")

    bindings, body = tail
    if not is_sequential(bindings):
        raise MalSyntaxError(f"let* bindings must be a list or vector, got {bindings!r}")
    if len(bindings) % 2 != 0:
        raise MalSyntaxError("let* bindings must come in name/value pairs")

    let_env = Environment(outer=env)
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise MalInvalidSymbol(f"let* expects a symbol, got {name!r}")
        let_env.set(name, evaluate_fn(val_expr, let_env))

    return evaluate_fn(body, let_env)
