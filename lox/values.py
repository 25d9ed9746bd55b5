"""
Runtime value helpers.

Lox values are plain Python objects: None is nil, bool, float and str.
bool is checked by exact type everywhere, so True is never mistaken for 1.0.
Shared by the interpreter and the tree printer, so it imports nothing from
either package.
"""

import math
from typing import Any


def is_number(value: Any) -> bool:
    return type(value) is float


def is_string(value: Any) -> bool:
    return type(value) is str


def is_truthy(value: Any) -> bool:
    """nil and false are falsy, everything else (0, "") is truthy."""
    if value is None:
        return False
    if type(value) is bool:
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    """Equality without coercion: different kinds are never equal."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if type(a) is not type(b):
        return False
    # NaN equals itself here, unlike float ==
    if is_number(a) and math.isnan(a) and math.isnan(b):
        return True
    return a == b


def stringify(value: Any) -> str:
    """Render a value the way the interpreter prints it."""
    if value is None:
        return "nil"
    if type(value) is bool:
        # Lox literal spelling, not Python's True/False
        return "true" if value else "false"
    if is_number(value):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        text = repr(value)
        if text.endswith(".0"):
            text = text[:-2]
        return text
    return str(value)
