from __future__ import annotations
from typing import TYPE_CHECKING

from owl import SExpression, LispValue
from owl.types.environment import Environment
from owl.types.nil import Nil

if TYPE_CHECKING:
    from owl.evaluation.evaluator import Evaluator


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluator: Evaluator,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluator.evaluate(env, e)
    return result
