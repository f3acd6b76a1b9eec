from __future__ import annotations

import logging
from typing import Literal, Optional

from mal import MalForm, MalValue
from mal.builtin.core import register
from mal.evaluation.evaluator import evaluate
from mal.errors import MalError
from mal.prelude import PRELUDE
from mal.printer import pr_str
from mal.reader.parser import TokenStream, read_str
from mal.reader.tokenizer import Tokenizer
from mal.types.environment import Environment
from mal.types.nil import Nil

log = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading, evaluating and printing mal code.
    Maintains one top-level Environment across calls, so bindings made by
    earlier successful requests stay visible to later ones.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude == 'auto':
            self.eval_prelude(PRELUDE)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> None:
        stream = TokenStream(Tokenizer(code))
        while (expr := stream.parse_expr()) is not None:
            evaluate(expr, self.env)

    def read(self, code: str) -> Optional[MalForm]:
        return read_str(code)

    def eval(self, code: str) -> MalValue:
        """Evaluate every form in `code`; the value of the last one, or Nil."""
        stream = TokenStream(Tokenizer(code))
        result: MalValue = Nil
        while (expr := stream.parse_expr()) is not None:
            result = evaluate(expr, self.env)
        return result

    def rep(self, line: str) -> str:
        """Read one form from `line`, evaluate it and print the result readably.

        Returns "" when the line holds no form. MalError propagates to the caller.
        """
        try:
            ast = self.read(line)
            if ast is None:
                return ""
            return pr_str(evaluate(ast, self.env), True)
        except MalError:
            log.debug("request failed: %r", line, exc_info=True)
            raise
