"""Exception hierarchy for the Owl reader and evaluator."""

from __future__ import annotations


class OwlError(Exception):
    """ Base class for all Owl errors"""
    pass


# -------------------------------
# Reader errors (recoverable)
# -------------------------------
class ReaderError(OwlError):
    """ Raised when source text cannot be read into a value"""

    def __init__(self, message: str = "", pos: int | None = None):
        super().__init__(message)
        self.message = message
        self.pos = pos

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, pos={self.pos})"


class NotANumber(ReaderError):
    """ Input at the cursor does not start a number"""

class NotABoolean(ReaderError):
    """ Input at the cursor is not #t/#T/#f/#F"""

class NotAString(ReaderError):
    """ Input at the cursor does not start a string"""

class NotAList(ReaderError):
    """ Input at the cursor does not start a list"""

class NotADoBlock(ReaderError):
    """ Input at the cursor does not start a {...} block"""

class NotAFunctionCall(ReaderError):
    """ Input at the cursor is not name(args...)"""

class UnterminatedString(ReaderError):
    """ An opening quote has no closing quote"""

class UnbalancedParenthesis(ReaderError):
    """ End of input reached before ')'"""

class UnbalancedBraces(ReaderError):
    """ End of input reached before '}'"""

class InvalidNumber(ReaderError):
    """ A number literal is malformed, e.g. has two dots"""

class InvalidSymbol(ReaderError):
    """ A symbol is empty"""

class GenericReaderError(ReaderError):
    """ No production matched the input"""


# Failures that mean "try the next production". Everything else propagates.
BACKTRACKABLE = (
    NotANumber,
    NotABoolean,
    NotAString,
    NotAList,
    NotADoBlock,
    NotAFunctionCall,
    InvalidSymbol,
)


# -------------------------------
# Evaluator errors (fatal)
# -------------------------------
class OwlEvaluationError(OwlError):
    """ Malformed use of a special form"""

class OwlInvalidSymbol(OwlEvaluationError):
    """ Raised when a symbol is required but something else was given"""

class OwlUnboundSymbol(OwlEvaluationError):
    """ Raised when a symbol is assigned before it is bound"""

class OwlNameError(OwlEvaluationError):
    """ Raised when a name is defined twice in the same scope"""

class OwlArityError(OwlEvaluationError):
    """ Raised when a special form gets too few arguments"""
