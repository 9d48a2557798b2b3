"""Callable value representation for Owl."""

from __future__ import annotations

from io import StringIO

from owl import SExpression
from owl.types.environment import Environment


class Func:
    """A function value: formal parameters, an unevaluated body and the defining env.

    The evaluator treats a Func as self-evaluating; there is no call path for it yet.
    """

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: SExpression, body: SExpression, env: Environment | None = None):
        self.formals: SExpression = formals
        self.body: SExpression = body
        # Avoid shared default Environment across instances
        self.env: Environment = env if env is not None else Environment()

    def __eq__(self, other: object) -> bool:
        # Functions compare by identity of their parts, not by captured bindings
        return (
            isinstance(other, Func)
            and self.formals == other.formals
            and self.body == other.body
            and self.env is other.env
        )

    def __hash__(self) -> int:
        return hash(id(self.env))

    def __str__(self) -> str:
        from owl.types.value import to_text
        with StringIO() as buffer:
            buffer.write("(fun ")
            buffer.write(to_text(self.formals))
            buffer.write(" ")
            buffer.write(to_text(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)
