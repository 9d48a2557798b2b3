from __future__ import annotations
from typing import TYPE_CHECKING

from owl import SExpression, LispValue
from owl.errors import OwlArityError
from owl.types.environment import Environment
from owl.types.nil import Nil

if TYPE_CHECKING:
    from owl.evaluation.evaluator import Evaluator


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluator: Evaluator,
) -> LispValue:
    if len(tail) < 2:
        evaluator.fatal(OwlArityError("if requires a condition and a then-expression"))

    if_false = tail[2] if len(tail) > 2 else Nil
    return evaluator.evaluate_if(env, tail[0], tail[1], if_false)
