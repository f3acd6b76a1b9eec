"""Runtime environment for mal.

An Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Lookups walk the chain innermost-first.
"""

from __future__ import annotations

from typing import Optional

from mal import MalValue
from mal.errors import MalInvalidSymbol, MalUnboundSymbol
from mal.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, MalValue] = {}
        self.outer: Environment | None = outer

    def set(self, name: Symbol, value: MalValue) -> MalValue:
        """Bind `name` to `value` in this frame, replacing any previous binding.

        Raises MalInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MalInvalidSymbol(f"Cannot bind {name!r}: not a symbol")
        self.vars[name] = value
        return value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> MalValue:
        """Look up the value bound to `name`.

        Raises MalUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise MalUnboundSymbol(name)
        return env.vars[name]

    def update(self, mapping: dict[Symbol, MalValue]) -> None:
        """Bulk-bind a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def __repr__(self) -> str:
        """Bound names per frame, innermost first."""
        frames = []
        env = self
        while env is not None:
            frames.append("[" + " ".join(sorted(env.vars)) + "]")
            env = env.outer
        return "<Environment " + " -> ".join(frames) + ">"
