"""
Lox Recursive Descent Parser

One method per grammar rule, lowest precedence first:

    expression -> equality
    equality   -> comparison ( ( "!=" | "==" ) comparison )*
    comparison -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term       -> factor ( ( "-" | "+" ) factor )*
    factor     -> unary ( ( "/" | "*" ) unary )*
    unary      -> ( "!" | "-" ) unary | primary
    primary    -> NUMBER | STRING | "true" | "false" | "nil" | "(" expression ")"

Binary levels are left-folding loops, so every binary operator is left
associative. Unary recurses on itself, so "--x" nests.

Author: xwest
"""

from typing import Callable, List, Optional, TYPE_CHECKING

from ..lexer.tokens import Token, TokenType
from .ast_nodes import Binary, Expr, Grouping, Literal, Unary
from .errors import (
    ParseError, create_expected_expression_error, create_nesting_too_deep_error,
    create_unclosed_grouping_error
)

if TYPE_CHECKING:
    from ..reporting import ErrorReporter


class Parser:
    """
    Lox expression parser.

    Consumes a token list ending in EOF and produces a single expression
    tree, or None when a syntax error is found anywhere.
    """

    def __init__(self, tokens: List[Token], reporter: Optional["ErrorReporter"] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the scanner (must end with EOF)
            reporter: Error sink; when None errors are only collected
        """
        self.tokens = tokens
        self.reporter = reporter
        self.current = 0
        self.errors: List[ParseError] = []

    def parse(self) -> Optional[Expr]:
        """
        Parse the token list into an expression tree.

        Returns:
            The root expression, or None if a syntax error was reported
        """
        self.current = 0
        try:
            return self._expression()
        except ParseError as e:
            error = e
        except RecursionError:
            error = create_nesting_too_deep_error(self._peek())

        # The whole input is abandoned, no partial tree
        self.errors.append(error)
        if self.reporter is not None:
            self.reporter.report(error.diagnostic)
        return None

    def _expression(self) -> Expr:
        return self._equality()

    def _equality(self) -> Expr:
        return self._left_fold(self._comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def _comparison(self) -> Expr:
        return self._left_fold(
            self._term,
            TokenType.GREATER, TokenType.GREATER_EQUAL,
            TokenType.LESS, TokenType.LESS_EQUAL
        )

    def _term(self) -> Expr:
        return self._left_fold(self._factor, TokenType.MINUS, TokenType.PLUS)

    def _factor(self) -> Expr:
        return self._left_fold(self._unary, TokenType.SLASH, TokenType.STAR)

    def _left_fold(self, operand: Callable[[], Expr], *operators: TokenType) -> Expr:
        """Parse operand (op operand)* into a left-leaning Binary chain."""
        expr = operand()

        while self._match(*operators):
            operator = self._previous()
            right = operand()
            expr = Binary(expr, operator, right)

        return expr

    def _unary(self) -> Expr:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            right = self._unary()
            return Unary(operator, right)

        return self._primary()

    def _primary(self) -> Expr:
        if self._match(TokenType.FALSE):
            return Literal(False)
        if self._match(TokenType.TRUE):
            return Literal(True)
        if self._match(TokenType.NIL):
            return Literal(None)

        if self._match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self._previous().literal)

        if self._match(TokenType.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenType.RIGHT_PAREN, create_unclosed_grouping_error)
            return Grouping(expr)

        raise create_expected_expression_error(self._peek())

    # Utility methods

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it has one of the given types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        return self.tokens[self.current]

    def _previous(self) -> Token:
        return self.tokens[self.current - 1]

    def _consume(self, token_type: TokenType, error: Callable[[Token], ParseError]) -> Token:
        """Consume token of expected type or raise the given error."""
        if self._check(token_type):
            return self._advance()
        raise error(self._peek())


def parse(source: str, reporter: Optional["ErrorReporter"] = None) -> Optional[Expr]:
    """
    Convenience function to scan and parse a source string.

    Args:
        source: Source code string
        reporter: Error sink for lexical and syntax errors

    Returns:
        Expression tree, or None on a syntax error
    """
    from ..lexer import scan

    tokens = scan(source, reporter)
    return Parser(tokens, reporter).parse()
