"""
Lox Parser Package

Implements a recursive descent parser for Lox expressions and the
immutable expression tree it produces.

Key Features:
- One method per precedence level, left-associative binary operators
- Closed set of visitor-dispatched expression nodes
- A syntax error abandons the whole input (no partial trees)
- Parenthesized prefix printer for inspecting trees

Author: xwest
"""

from .ast_nodes import Binary, Expr, ExprVisitor, Grouping, Literal, LoxValue, Unary
from .parser import Parser, parse
from .errors import ParseError
from .printer import AstPrinter

__all__ = [
    # Core parser
    "Parser",
    "parse",

    # AST nodes
    "Expr", "ExprVisitor", "LoxValue",
    "Binary", "Grouping", "Literal", "Unary",
    "AstPrinter",

    # Error handling
    "ParseError",
]
