"""Helpers over the Owl value model.

Values are plain Python objects:

    - None    -> Nil
    - Num     -> float
    - Str     -> str
    - Sym     -> Symbol
    - Atom    -> Atom
    - Bool    -> bool
    - List    -> list
    - Func    -> Func
"""

from __future__ import annotations

from owl import LispValue
from owl.types.func import Func
from owl.types.nil import Nil, NilType
from owl.types.symbol import Atom, Symbol


def is_true(value: LispValue) -> bool:
    """Condition truthiness: Nil, #f and 0.0 are false, everything else is true."""
    if isinstance(value, NilType):
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return value != 0.0
    return True


def as_num(value: LispValue) -> float:
    """Direct numeric coercion, no evaluation: anything that is not a number is 0.0."""
    if isinstance(value, float):
        return value
    return 0.0


def car(value: LispValue) -> LispValue:
    if isinstance(value, list) and value:
        return value[0]
    return Nil


def cdr(value: LispValue) -> list[LispValue]:
    if isinstance(value, list):
        return value[1:]
    return []


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality. Types must match, so #t is never equal to 1."""
    if a is b:
        return True
    if type(a) != type(b):
        return False
    if isinstance(a, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


def format_number(n: float) -> str:
    if n.is_integer():
        return str(int(n))
    return repr(n)


def to_text(value: LispValue) -> str:
    """Textual form of a value; the head of a form is dispatched on this."""
    match value:
        case bool():
            return "#t" if value else "#f"
        case float():
            return format_number(value)
        case str():
            return value
        case Symbol() | Atom():
            return value.id
        case NilType():
            return "nil"
        case list():
            return "(" + " ".join(to_text(v) for v in value) + ")"
        case Func():
            return str(value)
    return str(value)


def type_name(value: LispValue) -> str:
    match value:
        case NilType():
            return "none"
        case bool():
            return "bool"
        case float():
            return "num"
        case str():
            return "str"
        case Symbol():
            return "sym"
        case Atom():
            return "atom"
        case list():
            return "list"
        case Func():
            return "func"
    return type(value).__name__
