"""Core evaluator for mal.

Lists are checked against the special-form table on their unevaluated head
before anything is evaluated; everything else is ordinary application.
"""

from __future__ import annotations

from mal import MalForm, MalValue
from mal.types.environment import Environment
from mal.types.hash_map import HashMap
from mal.types.sequences import List, Vector
from mal.types.symbol import Symbol
from mal.evaluation.apply import apply
from mal.evaluation.special_forms import SPECIAL_FORMS


def eval_ast(ast: MalForm, env: Environment) -> MalValue:
    """Evaluate the parts of a non-special form.

    Symbols are looked up, sequences and map values are evaluated element-wise
    into new collections (map keys are left alone), other atoms evaluate to
    themselves.
    """
    match ast:
        case Symbol():
            return env.get(ast)
        case List():
            return List(evaluate(x, env) for x in ast)
        case Vector():
            return Vector(evaluate(x, env) for x in ast)
        case HashMap():
            return HashMap((k, evaluate(v, env)) for k, v in ast.items())
    return ast


def evaluate(ast: MalForm, env: Environment) -> MalValue:
    if not isinstance(ast, List):
        return eval_ast(ast, env)
    if not ast:
        return ast

    head = ast[0]
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        return SPECIAL_FORMS[head](list(ast[1:]), env, evaluate)

    fn, *args = eval_ast(ast, env)
    return apply(fn, args, env, evaluate)
