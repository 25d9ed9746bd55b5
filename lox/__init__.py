"""
Lox Expression Interpreter Package

A scanner, recursive descent parser and tree-walking evaluator for the
expression subset of Lox: arithmetic, comparison, equality, logical
negation, literals and grouping.

Architecture:
    lox/
    ├── lexer/           # Tokens and scanning
    ├── parser/          # Expression trees, parsing, tree printer
    ├── interpreter/     # Evaluation and runtime errors
    ├── values.py        # Truthiness, equality and rendering of values
    ├── reporting.py     # Error sink shared by all stages
    └── cli.py           # File runner and REPL

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, scan
from .parser import Parser, AstPrinter, parse
from .interpreter import Interpreter, LoxRuntimeError
from .reporting import ErrorReporter

__all__ = [
    # Core classes
    "Scanner",
    "Parser",
    "Interpreter",
    "AstPrinter",
    "ErrorReporter",
    "Token",
    "TokenType",
    "LoxRuntimeError",

    # Convenience functions
    "scan",
    "parse",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
