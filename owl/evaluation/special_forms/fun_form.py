from __future__ import annotations
from typing import TYPE_CHECKING

from owl import SExpression, LispValue
from owl.errors import OwlArityError, OwlInvalidSymbol, OwlNameError
from owl.types.environment import Environment
from owl.types.nil import Nil
from owl.types.symbol import Symbol

if TYPE_CHECKING:
    from owl.evaluation.evaluator import Evaluator


def fun_form(
    tail: list[SExpression],
    env: Environment,
    evaluator: Evaluator,
) -> LispValue:
    """
    (fun name ...)
    Only the name is checked. No Func is built or bound and the result is nil;
    calling user-defined functions is not supported.
    """
    if not tail:
        evaluator.fatal(OwlArityError("fun requires a name"))
    name = tail[0]
    if not isinstance(name, Symbol):
        evaluator.fatal(OwlInvalidSymbol(f"fun first argument must be a Symbol, got {name!r}"))
    if env.has_local(name):
        evaluator.fatal(OwlNameError(f"fun cannot redefine {name}"))
    return Nil
