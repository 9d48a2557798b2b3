from __future__ import annotations


class NilType:
    """The absence of a value. Falsy, and distinct from boolean false."""

    def __repr__(self): return "nil"
    def __bool__(self): return False

    # Equal only to Nil; never to False, 0.0 or the empty list
    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
