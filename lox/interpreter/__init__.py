"""
Lox Interpreter Package

Tree-walking evaluation of Lox expression trees:
- Dynamically typed values (nil, booleans, numbers, strings)
- Operand type checks on every operator
- Truthiness, equality and printing rules
- Runtime errors reported with the operator's line

Author: xwest
"""

from .interpreter import Interpreter
from .errors import LoxRuntimeError
from ..values import is_equal, is_truthy, stringify

__all__ = [
    # Evaluator
    "Interpreter",

    # Value rules
    "is_truthy", "is_equal", "stringify",

    # Error handling
    "LoxRuntimeError",
]
