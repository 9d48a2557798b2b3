from __future__ import annotations
from typing import TYPE_CHECKING

from owl import SExpression, LispValue
from owl.errors import OwlArityError, OwlInvalidSymbol
from owl.types.environment import Environment
from owl.types.symbol import Symbol

if TYPE_CHECKING:
    from owl.evaluation.evaluator import Evaluator


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluator: Evaluator,
) -> LispValue:
    """
    (def name value)
    Binds in the innermost scope, overwriting a binding of the same name there.
    Arguments after the value are ignored.
    """
    if len(tail) < 2:
        evaluator.fatal(OwlArityError("def requires a name and a value: (def name value)"))

    name, val_expr = tail[0], tail[1]
    if not isinstance(name, Symbol):
        evaluator.fatal(OwlInvalidSymbol(f"def first argument must be a Symbol, got {name!r}"))
    value = evaluator.evaluate(env, val_expr)
    env.define(name, value)
    return value
