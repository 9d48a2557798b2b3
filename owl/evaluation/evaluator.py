"""Core evaluator for the Owl interpreter.

Walks a form against an Environment. A non-empty list is dispatched on the
text of its head: first the fixed special forms, then the intrinsic registry.
Anything else evaluates to nil.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, NoReturn, Optional

from owl import SExpression, LispValue
from owl.builtin.intrinsics import Intrinsic, register
from owl.config import Config, FATAL_EXIT_STATUS
from owl.errors import OwlEvaluationError, ReaderError
from owl.evaluation.special_forms import SPECIAL_FORMS
from owl.reader.reader import Reader
from owl.types.environment import Environment
from owl.types.nil import Nil
from owl.types.symbol import Symbol
from owl.types.value import is_true, to_text

logger = logging.getLogger(__name__)

# Returned by evaluate_special_form when the head names no special form
NOT_SPECIAL = object()


class Evaluator:
    """Evaluates Owl forms. Holds its own intrinsic registry; no global state."""

    def __init__(self, config: Optional[Config] = None):
        self.config: Config = config if config is not None else Config()
        self._intrinsics: dict[str, Intrinsic] = {}
        self.base_intrinsics()

    # --- Intrinsic registry ---
    def base_intrinsics(self) -> None:
        register(self)

    def add_intrinsic(self, intrinsic: Intrinsic) -> None:
        logger.debug("registering intrinsic %r", intrinsic.name)
        self._intrinsics[intrinsic.name] = intrinsic

    def is_intrinsic(self, name: str | Symbol) -> bool:
        return str(name) in self._intrinsics

    def get_intrinsic(self, name: str | Symbol) -> Optional[Intrinsic]:
        return self._intrinsics.get(str(name))

    @property
    def intrinsics(self) -> Mapping[str, Intrinsic]:
        return MappingProxyType(self._intrinsics)

    # --- Fatal conditions ---
    def fatal(self, error: OwlEvaluationError) -> NoReturn:
        """Raise `error`, or exit the process when the policy is 'exit'."""
        if self.config.fatal_policy == "exit":
            logger.critical("fatal: %s", error)
            raise SystemExit(FATAL_EXIT_STATUS) from error
        raise error

    # --- Evaluation ---
    def evaluate_if(
        self,
        env: Environment,
        cond: SExpression,
        if_true: SExpression,
        if_false: SExpression,
    ) -> LispValue:
        if is_true(self.evaluate(env, cond)):
            return self.evaluate(env, if_true)
        return self.evaluate(env, if_false)

    def evaluate_special_form(
        self, env: Environment, ident: str, args: list[SExpression]
    ) -> LispValue:
        form = SPECIAL_FORMS.get(ident)
        if form is None:
            return NOT_SPECIAL
        return form(args, env, self)

    def evaluate(self, env: Environment, expr: SExpression) -> LispValue:
        match expr:
            case []:
                return []
            case [head, *args]:
                ident = to_text(head)

                result = self.evaluate_special_form(env, ident, args)
                if result is not NOT_SPECIAL:
                    return result

                intrinsic = self.get_intrinsic(ident)
                if intrinsic is not None:
                    return intrinsic.eval(self, env, args)

                logger.debug("unknown operator %r evaluates to nil", ident)
                return Nil
            case Symbol():
                return env.get(expr)

        # --- Atoms return as-is ---
        return expr

    def eval(self, env: Environment, code: str) -> LispValue:
        """Read one form from `code` and evaluate it. Reader errors are logged, not raised."""
        reader = Reader()
        try:
            expr = reader.read(code)
        except ReaderError as e:
            logger.error("Error %r", e)
            return Nil
        return self.evaluate(env, expr)


def eval_source(code: str, config: Optional[Config] = None) -> LispValue:
    """Evaluate one form in a fresh environment."""
    env = Environment()
    return Evaluator(config).eval(env, code)
