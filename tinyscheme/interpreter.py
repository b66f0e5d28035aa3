from __future__ import annotations

import logging
from typing import Literal

from tinyscheme import LispValue
from tinyscheme.builtin.env_builtin import standard_env
from tinyscheme.config import get_prelude_path
from tinyscheme.evaluation.evaluator import evaluate
from tinyscheme.printer import stringify
from tinyscheme.reader.parser import parse_all
from tinyscheme.types.environment import Environment
from tinyscheme.types.novalue import NoValue

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Owns one global environment and evaluates source text against it.
    Definitions persist across calls to eval/run.
    """

    def __init__(self, prelude: str | None | Literal["auto"] = None):
        self.env: Environment = standard_env()

        if prelude == "auto":
            path = get_prelude_path()
            if path is not None:
                logger.info("loading prelude %s", path)
                self.eval(path.read_text(encoding="utf-8"))
        elif prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`; return the last value (NoValue if none)."""
        result: LispValue = NoValue
        for expr in parse_all(code):
            result = evaluate(expr, self.env)
        return result

    def run(self, code: str) -> str:
        return stringify(self.eval(code))
