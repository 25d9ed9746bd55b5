"""
Error handling for the Lox parser.

Provides the syntax error type, statement-boundary recovery and helpers
for the syntax errors the expression grammar can produce.

Author: xwest
"""

from typing import List, Optional

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Raised when the parser hits a syntax error.

    Unwinds the current parse attempt; Parser.parse() turns it into a
    ``None`` result after reporting it once.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.token = token
        self.diagnostic = Diagnostic(
            message=message,
            line=token.line,
            severity="error",
            phase="parser",
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class SyntaxErrorRecovery:
    """
    Utilities for error recovery in the parser.

    The expression grammar has no statement level, so nothing calls these
    yet; they are what a statement parser would use to resume after an error.
    """

    # Token types that begin a statement
    STATEMENT_STARTS = {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }

    @staticmethod
    def synchronize_to_statement_boundary(tokens: List[Token], current_pos: int) -> int:
        """
        Skip past the offending token to the next likely statement boundary.

        Returns the position to resume parsing from: just after a ';', at a
        statement keyword, or at EOF.
        """
        last = len(tokens) - 1
        if current_pos >= last:
            return last

        pos = current_pos + 1
        while pos < last and tokens[pos].type != TokenType.EOF:
            if tokens[pos - 1].type == TokenType.SEMICOLON:
                return pos
            if tokens[pos].type in SyntaxErrorRecovery.STATEMENT_STARTS:
                return pos
            pos += 1

        return pos


# Common parser error codes for categorization
PARSER_ERROR_CODES = {
    "P001": "Expected expression",
    "P002": "Unclosed grouping",
    "P003": "Expression nested too deeply",
}


def create_expected_expression_error(found: Token) -> ParseError:
    """Create an error for a token that cannot start an expression."""
    if found.type == TokenType.EOF:
        help_text = "The input ended where an operand was expected."
    else:
        help_text = f"'{found.lexeme}' cannot start an expression."

    return ParseError(
        message="Expect expression.",
        token=found,
        code="P001",
        help_text=help_text
    )


def create_unclosed_grouping_error(found: Token) -> ParseError:
    """Create an error for a '(' whose ')' never arrives."""
    return ParseError(
        message="Expect ')' after expression.",
        token=found,
        code="P002",
        help_text="Add a closing parenthesis ')'."
    )


def create_nesting_too_deep_error(found: Token) -> ParseError:
    """Create an error for input nested deeper than the parser can recurse."""
    return ParseError(
        message="Expression nested too deeply.",
        token=found,
        code="P003",
        help_text="Split the expression or remove redundant parentheses and unary operators."
    )
