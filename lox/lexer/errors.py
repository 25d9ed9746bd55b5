"""
Error handling for the Lox lexer.

Provides the shared Diagnostic record used by every stage, the lexer's
error type and helpers for the lexical errors the scanner can hit.

Author: xwest
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A single reported problem (lexical, syntax or runtime)."""
    message: str
    line: int
    severity: str  # "error", "warning"
    phase: str  # "lexer", "parser", "runtime"
    code: Optional[str] = None
    where: str = ""
    help_text: Optional[str] = None

    def __str__(self) -> str:
        if self.phase == "runtime":
            return f"{self.message}\n[line {self.line}]"
        return f"[line {self.line}] Error{self.where}: {self.message}"

    def render(self, verbose: bool = False) -> str:
        """Render the diagnostic, optionally with its code and help text."""
        result = str(self)
        if verbose:
            if self.code:
                result += f"\n  code: {self.code}"
            if self.help_text:
                result += f"\n  help: {self.help_text}"
        return result


class LexerError(Exception):
    """
    Raised by the scanner for a single lexical problem.

    The scanner catches it, records it and keeps scanning, so one input
    can produce several of these.
    """

    def __init__(
        self,
        message: str,
        line: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            phase="lexer",
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


def create_unexpected_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message="Unexpected character.",
        line=line,
        code="L001",
        help_text=help_text
    )


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal missing its closing quote."""
    return LexerError(
        message="Unterminated string.",
        line=line,
        code="L002",
        help_text='String literals must be closed with a matching " quote.'
    )
