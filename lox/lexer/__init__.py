"""
Lox Lexer Package

Implements the lexical analyzer (scanner) for the Lox expression language.

Key Features:
- Single-pass scanning with maximal munch for two-character operators
- Line comments, string and number literals, reserved keywords
- Error recovery: every lexical error is collected and scanning continues
- Line tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Scanner, scan
from .errors import Diagnostic, LexerError

__all__ = [
    "Scanner",
    "scan",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
]
