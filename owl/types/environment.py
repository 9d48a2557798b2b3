"""Runtime environment for Owl.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. The link does not own the enclosing scope;
several children may share one parent.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Optional

from owl import LispValue
from owl.errors import OwlInvalidSymbol, OwlUnboundSymbol
from owl.types.nil import Nil
from owl.types.symbol import Symbol


def _key(name: str | Symbol) -> str:
    if isinstance(name, Symbol):
        return name.id
    if isinstance(name, str):
        return name
    raise OwlInvalidSymbol(f"Cannot use {name!r} as a name")


class Environment:
    """Hierarchical mapping from names to Owl values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def child(self) -> Environment:
        """Return a new empty scope whose parent is this one."""
        return Environment(outer=self)

    def define(self, name: str | Symbol, value: LispValue) -> None:
        """Bind `name` in this scope, shadowing any binding in an outer scope."""
        self.vars[_key(name)] = value

    def set(self, name: str | Symbol, value: LispValue) -> None:
        """Host-side binding, used to pre-seed a session. Same as `define`."""
        self.define(name, value)

    def find(self, name: str | Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        key = _key(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def assign(self, name: str | Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises OwlUnboundSymbol if the name is not bound in any scope.
        """
        env = self.find(name)
        if env is None:
            raise OwlUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[_key(name)] = value

    def get(self, name: str | Symbol) -> LispValue:
        """Look up `name` innermost-out. Unbound names yield Nil."""
        env = self.find(name)
        if env is None:
            return Nil
        return env.vars[_key(name)]

    def has(self, name: str | Symbol) -> bool:
        return self.find(name) is not None

    def has_local(self, name: str | Symbol) -> bool:
        return _key(name) in self.vars

    def chain(self) -> Iterator[Environment]:
        """Yield the scopes from innermost to outermost."""
        env: Optional[Environment] = self
        while env is not None:
            yield env
            env = env.outer

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            frames = []
            for env in self.chain():
                with StringIO() as frame:
                    env._write_vars(frame)
                    frames.append(frame.getvalue())
            buffer.write(" -> ".join(frames))
            buffer.write(">")
            return buffer.getvalue()
