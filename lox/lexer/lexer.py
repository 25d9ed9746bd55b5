"""
Lox Scanner - turns source text into tokens

Single forward pass with one character of lookahead (two for the decimal
point in numbers). Lexical errors never stop the scan: each one is recorded,
reported, and scanning resumes at the next character.

xwest
"""

from typing import List, Optional, TYPE_CHECKING

from .tokens import (
    Token, TokenType, TokenLiteral, KEYWORDS, SINGLE_CHAR_TOKENS, EQUAL_SUFFIX_TOKENS
)
from .errors import (
    LexerError, create_unexpected_character_error, create_unterminated_string_error
)

if TYPE_CHECKING:
    from ..reporting import ErrorReporter


class Scanner:
    """
    Lox lexical analyzer.

    Converts source code text into a list of tokens terminated by EOF.
    """

    def __init__(self, source: str, reporter: Optional["ErrorReporter"] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Source code string
            reporter: Error sink; when None errors are only collected
        """
        self.source = source
        self.reporter = reporter
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens including the EOF token
        """
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens = []
        self.errors = []

        while not self._is_at_end():
            self.start = self.current
            try:
                self._scan_token()
            except LexerError as e:
                # The offending character (or the whole unterminated string)
                # is already consumed, so just carry on
                self.errors.append(e)
                if self.reporter is not None:
                    self.reporter.report(e.diagnostic)

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        return self.tokens

    def _scan_token(self):
        """Classify and consume the next token."""
        c = self._advance()

        if c in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[c])
        elif c in EQUAL_SUFFIX_TOKENS:
            with_equal, alone = EQUAL_SUFFIX_TOKENS[c]
            self._add_token(with_equal if self._match("=") else alone)
        elif c == "/":
            if self._match("/"):
                # Comment runs to end of line, the newline itself is left
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif c in " \r\t":
            pass
        elif c == "\n":
            self.line += 1
        elif c == '"':
            self._string()
        elif _is_digit(c):
            self._number()
        elif _is_alpha(c):
            self._identifier()
        else:
            raise create_unexpected_character_error(c, self.line)

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            raise create_unterminated_string_error(self.line)

        self._advance()  # Closing quote

        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self):
        """Scan a number literal: digits, optionally '.' and more digits."""
        while _is_digit(self._peek()):
            self._advance()

        # A trailing '.' with no digit after it is left for the next token
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def _identifier(self):
        """Scan an identifier and reclassify reserved words."""
        while _is_alpha_numeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        self._add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))

    def _add_token(self, token_type: TokenType, literal: TokenLiteral = None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is the expected one."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _advance(self) -> str:
        self.current += 1
        return self.source[self.current - 1]

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def has_errors(self) -> bool:
        """Check if the scanner encountered any errors."""
        return len(self.errors) > 0


# Only ASCII counts: str.isdigit()/isalpha() would accept '²' or 'é'

def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "_"


def _is_alpha_numeric(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


def scan(source: str, reporter: Optional["ErrorReporter"] = None) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        reporter: Error sink for lexical errors

    Returns:
        List of tokens ending with EOF (lexical errors do not raise)
    """
    return Scanner(source, reporter).scan_tokens()
