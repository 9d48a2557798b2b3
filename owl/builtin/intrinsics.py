"""Built-in operations (intrinsics) for the Owl evaluator.

An intrinsic receives its arguments unevaluated and decides for itself which to
evaluate. Arithmetic works on floats only; a non-numeric argument counts as 0.0.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from owl import LispValue, SExpression
from owl.types.environment import Environment
from owl.types.nil import Nil
from owl.types.symbol import Symbol
from owl.types.value import as_num, car, cdr, is_equal

if TYPE_CHECKING:
    from owl.evaluation.evaluator import Evaluator


class Intrinsic(ABC):
    """A named, stateless built-in operation."""

    name: str = ""

    @abstractmethod
    def eval(self, evaluator: Evaluator, env: Environment, args: list[SExpression]) -> LispValue:
        ...

    def __repr__(self) -> str:
        return f"<intrinsic {self.name}>"


def evaluate_num(evaluator: Evaluator, env: Environment, expr: SExpression) -> float:
    return as_num(evaluator.evaluate(env, expr))


def first_operand(evaluator: Evaluator, env: Environment, args: list[SExpression]) -> LispValue:
    """The head operand of -, / and =.

    Taken as written (not evaluated) unless the evaluator is configured for
    uniform argument evaluation.
    """
    head = car(args)
    if evaluator.config.uniform_arguments and args:
        return evaluator.evaluate(env, head)
    return head


def divide(a: float, b: float) -> float:
    """IEEE-754 division: x/0 gives a signed infinity, 0/0 gives nan."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


# -------------------------------
# Evaluation
# -------------------------------
class Eval(Intrinsic):
    """(eval x): evaluate x, then evaluate the result once more.

    A string is read as source first; a list or symbol result is evaluated
    again; any other result is returned as is.
    """

    name = "eval"

    def eval(self, evaluator, env, args):
        if not args:
            return Nil
        expr = args[0]
        if isinstance(expr, str):
            return evaluator.eval(env, expr)
        value = evaluator.evaluate(env, expr)
        if isinstance(value, str):
            return evaluator.eval(env, value)
        if isinstance(value, (list, Symbol)):
            return evaluator.evaluate(env, value)
        return value


# -------------------------------
# Arithmetic
# -------------------------------
class Add(Intrinsic):
    name = "+"

    def eval(self, evaluator, env, args):
        total = 0.0
        for arg in args:
            total += evaluate_num(evaluator, env, arg)
        return total


class Mul(Intrinsic):
    name = "*"

    def eval(self, evaluator, env, args):
        total = 1.0
        for arg in args:
            total *= evaluate_num(evaluator, env, arg)
        return total


class Sub(Intrinsic):
    name = "-"

    def eval(self, evaluator, env, args):
        total = as_num(first_operand(evaluator, env, args))
        for arg in cdr(args):
            total -= evaluate_num(evaluator, env, arg)
        return total


class Div(Intrinsic):
    name = "/"

    def eval(self, evaluator, env, args):
        total = as_num(first_operand(evaluator, env, args))
        for arg in cdr(args):
            total = divide(total, evaluate_num(evaluator, env, arg))
        return total


# -------------------------------
# Comparison
# -------------------------------
class Equals(Intrinsic):
    """(= head x ...): #t when every x evaluates structurally equal to head."""

    name = "="

    def eval(self, evaluator, env, args):
        if not args:
            return False
        head = first_operand(evaluator, env, args)
        for arg in cdr(args):
            if not is_equal(head, evaluator.evaluate(env, arg)):
                return False
        return True


BASE_INTRINSICS: tuple[type[Intrinsic], ...] = (Eval, Equals, Add, Mul, Sub, Div)


def register(evaluator: Evaluator) -> None:
    """Register the base intrinsics on the given evaluator."""
    for cls in BASE_INTRINSICS:
        evaluator.add_intrinsic(cls())
