from __future__ import annotations

import logging
from typing import Mapping, Optional

from owl import LispValue
from owl.config import Config
from owl.evaluation.evaluator import Evaluator
from owl.reader.reader import Reader
from owl.types.environment import Environment
from owl.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One evaluation session: an Environment and an Evaluator kept across calls.
    Unlike Evaluator.eval, reader errors propagate to the caller.

    `bindings` pre-seeds the root scope before the prelude runs.

    Note: `Config.log_level` is applied to the process-wide 'owl' logger, so it
    affects every session in the process, not only this one. Sessions share no
    other state.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        prelude: Optional[str] = None,
        bindings: Optional[Mapping[str, LispValue]] = None,
    ):
        self.config: Config = config if config is not None else Config.from_env()
        if self.config.log_level:
            logging.getLogger("owl").setLevel(self.config.log_level)

        self.env: Environment = Environment()
        if bindings:
            self.env.update(dict(bindings))
        self.evaluator: Evaluator = Evaluator(self.config)

        if prelude:
            logger.debug("evaluating prelude (%d chars)", len(prelude))
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` in order and return the last value."""
        reader = Reader()
        result: LispValue = Nil
        for expr in reader.read_all(code):
            result = self.evaluator.evaluate(self.env, expr)
        return result

    def define(self, name: str, value: LispValue) -> None:
        """Pre-seed a binding in the session's root scope."""
        self.env.set(name, value)

    def get(self, name: str) -> LispValue:
        return self.env.get(name)
