"""Closure representation for mal."""

from __future__ import annotations

from mal import MalForm, MalValue
from mal.types.environment import Environment
from mal.types.bind import bind_arguments


class Lambda:
    """A first-class closure: parameter list, body form and defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: MalForm, body: MalForm, env: Environment):
        self.params: MalForm = params
        self.body: MalForm = body
        # Shared with every other closure and scope created in the same frame
        self.env: Environment = env

    def __repr__(self) -> str:
        return f"<Lambda {self.params!r}>"

    def extend_env(self, args: list[MalValue]) -> Environment:
        """Bind the argument values to this closure's parameters in a child of its env."""
        return bind_arguments(self.params, args, self.env)
