# Core type aliases for Owl's data model.
# Values are plain Python objects (float, str, bool, list) plus Symbol, Atom,
# Func and the Nil singleton from owl.types. Code and data share one shape:
# a list read from source is evaluated as a form.
#
# Naming guidance:
# - SExpression: Use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any

LispValue = Any
SExpression = LispValue

__version__ = "0.1.0"
