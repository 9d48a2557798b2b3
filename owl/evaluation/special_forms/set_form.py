from __future__ import annotations
from typing import TYPE_CHECKING

from owl import SExpression, LispValue
from owl.errors import OwlArityError, OwlInvalidSymbol, OwlUnboundSymbol
from owl.types.environment import Environment
from owl.types.symbol import Symbol

if TYPE_CHECKING:
    from owl.evaluation.evaluator import Evaluator


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluator: Evaluator,
) -> LispValue:
    if len(tail) < 2:
        evaluator.fatal(OwlArityError("set requires a name and a value: (set var value)"))
    var_sym, val_expr = tail[0], tail[1]
    if not isinstance(var_sym, Symbol):
        evaluator.fatal(OwlInvalidSymbol(f"set first argument must be a Symbol, got {var_sym!r}"))
    if not env.has(var_sym):
        evaluator.fatal(OwlUnboundSymbol(f"Cannot set unbound symbol {var_sym}"))
    value = evaluator.evaluate(env, val_expr)
    env.assign(var_sym, value)
    return value
