"""
  Owl Reader: lexer and parser in one pass.

- Cursor based: `Reader.read` consumes one form and leaves `pos` just past it,
  so repeated calls walk a script form by form.
- Productions are tried in a fixed order; a production that does not match
  restores the cursor before the next one is tried:

    1. number        -?.?[0-9]+ with at most one '.'
    2. boolean       #t #T #f #F
    3. string        "raw text, no escapes"
    4. list          ( expr* )
    5. do-block      { expr* }          -> [do, expr*]
    6. function call name(expr*)        -> [name, expr*]
    7. symbol        run of non-whitespace, non-delimiter chars

- Emits plain Python values:

    - numbers -> float
    - booleans -> bool
    - strings -> str
    - symbols -> Symbol
    - lists -> list
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from owl import SExpression
from owl.errors import (
    BACKTRACKABLE,
    GenericReaderError,
    InvalidNumber,
    InvalidSymbol,
    NotABoolean,
    NotADoBlock,
    NotAFunctionCall,
    NotAList,
    NotANumber,
    NotAString,
    ReaderError,
    UnbalancedBraces,
    UnbalancedParenthesis,
    UnterminatedString,
)
from owl.types.symbol import Symbol

logger = logging.getLogger(__name__)

SYMBOL_DELIMITERS = frozenset("()[]{}<>'")

BOOLEANS: dict[str, bool] = {
    "t": True,
    "T": True,
    "f": False,
    "F": False,
}

DO = Symbol("do")


def _is_digit(ch: Optional[str]) -> bool:
    return ch is not None and "0" <= ch <= "9"


class Reader:
    """Reads Owl forms from source text, one per call to `read`."""

    __slots__ = ("pos",)

    def __init__(self):
        self.pos: int = 0

    def reset(self) -> None:
        """Rewind the cursor to the start of the text."""
        self.pos = 0

    def at_eof(self, code: str) -> bool:
        return self.pos >= len(code)

    def chr(self, code: str) -> Optional[str]:
        """The character under the cursor, or None at end of input."""
        if self.pos < len(code):
            return code[self.pos]
        return None

    def is_whitespace(self, code: str) -> bool:
        ch = self.chr(code)
        return ch is not None and ch.isspace()

    def skip_whitespace(self, code: str) -> None:
        while not self.at_eof(code) and self.is_whitespace(code):
            self.pos += 1

    # ----------------------
    # Productions
    # ----------------------
    def read_number(self, code: str) -> float:
        start = self.pos
        is_real = False

        if self.chr(code) == "-":
            self.pos += 1

        if self.chr(code) == ".":
            self.pos += 1
            is_real = True

        if not _is_digit(self.chr(code)):
            self.pos = start
            raise NotANumber("not a number", start)

        while not self.at_eof(code):
            ch = self.chr(code)
            if ch == ".":
                if is_real:
                    self.pos = start
                    raise InvalidNumber("Too many dots", start)
                is_real = True
            elif not _is_digit(ch):
                break
            self.pos += 1

        text = code[start:self.pos]
        try:
            return float(text)
        except ValueError as e:
            self.pos = start
            raise InvalidNumber(str(e), start) from e

    def read_boolean(self, code: str) -> bool:
        start = self.pos
        if self.chr(code) != "#":
            raise NotABoolean("not a boolean", start)
        self.pos += 1
        ch = self.chr(code)
        if ch not in BOOLEANS:
            self.pos = start
            raise NotABoolean("not a boolean", start)
        self.pos += 1
        # #t must stand alone; "#true" is a symbol
        after = self.chr(code)
        if after is not None and not after.isspace() and after not in SYMBOL_DELIMITERS:
            self.pos = start
            raise NotABoolean("not a boolean", start)
        return BOOLEANS[ch]

    def read_string(self, code: str) -> str:
        start = self.pos
        if self.chr(code) != '"':
            raise NotAString("not a string", start)
        end = code.find('"', start + 1)
        if end < 0:
            self.pos = start
            raise UnterminatedString("Unterminated string", start)
        self.pos = end + 1
        return code[start + 1:end]

    def _read_sequence(self, code: str, close: str, error: type[ReaderError]) -> list[SExpression]:
        """Read forms up to `close`; the opening delimiter is already consumed."""
        items: list[SExpression] = []
        while True:
            self.skip_whitespace(code)
            if self.at_eof(code):
                raise error(f"Expected '{close}' before end of input", self.pos)
            if self.chr(code) == close:
                self.pos += 1
                return items
            items.append(self.read(code))

    def read_list(self, code: str) -> list[SExpression]:
        start = self.pos
        if self.chr(code) != "(":
            raise NotAList("not a list", start)
        self.pos += 1
        try:
            return self._read_sequence(code, ")", UnbalancedParenthesis)
        except ReaderError:
            self.pos = start
            raise

    def read_do_block(self, code: str) -> list[SExpression]:
        start = self.pos
        if self.chr(code) != "{":
            raise NotADoBlock("not a do-block", start)
        self.pos += 1
        try:
            return [DO, *self._read_sequence(code, "}", UnbalancedBraces)]
        except ReaderError:
            self.pos = start
            raise

    def read_function_call(self, code: str) -> list[SExpression]:
        start = self.pos
        try:
            head = self.read_symbol(code)
        except InvalidSymbol:
            raise NotAFunctionCall("not a function call", start)
        if self.chr(code) != "(":
            self.pos = start
            raise NotAFunctionCall("not a function call", start)
        try:
            args = self.read_list(code)
        except BACKTRACKABLE:
            self.pos = start
            raise NotAFunctionCall("malformed argument list", start)
        except ReaderError:
            self.pos = start
            raise
        return [head, *args]

    def read_symbol(self, code: str) -> Symbol:
        start = self.pos
        while not self.at_eof(code):
            ch = self.chr(code)
            if ch.isspace() or ch in SYMBOL_DELIMITERS:
                break
            self.pos += 1
        if self.pos == start:
            raise InvalidSymbol("empty symbol", start)
        return Symbol(code[start:self.pos])

    PRODUCTIONS = (
        read_number,
        read_boolean,
        read_string,
        read_list,
        read_do_block,
        read_function_call,
        read_symbol,
    )

    # ----------------------
    # Entry points
    # ----------------------
    def read(self, code: str) -> SExpression:
        """Read the next form from `code`.

        On failure the cursor is left where this call started and a ReaderError
        subclass is raised.
        """
        start = self.pos
        self.skip_whitespace(code)
        if self.at_eof(code):
            self.pos = start
            raise GenericReaderError("Unexpected end of input", start)

        for production in self.PRODUCTIONS:
            try:
                return production(self, code)
            except BACKTRACKABLE:
                continue
            except ReaderError:
                self.pos = start
                raise
            except RecursionError as e:
                self.pos = start
                raise GenericReaderError("nesting too deep", start) from e

        at = self.pos
        self.pos = start
        raise GenericReaderError(f"Unexpected character {code[at]!r} at {at}", at)

    def read_all(self, code: str) -> Iterator[SExpression]:
        """Yield every remaining top-level form in `code`."""
        while True:
            self.skip_whitespace(code)
            if self.at_eof(code):
                break
            expr = self.read(code)
            logger.debug("read form ending at %d", self.pos)
            yield expr
