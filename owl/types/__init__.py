from owl.types.nil import Nil, NilType
from owl.types.symbol import Atom, Symbol
from owl.types.environment import Environment
from owl.types.func import Func

__all__ = ["Nil", "NilType", "Atom", "Symbol", "Environment", "Func"]
