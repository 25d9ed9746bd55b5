"""
Runtime error handling for the Lox interpreter.

Every operator checks its operand types before applying itself; a mismatch
raises LoxRuntimeError carrying the operator token, so the report can name
the line.

Author: xwest
"""

from typing import Optional

from ..lexer.tokens import Token
from ..lexer.errors import Diagnostic


class LoxRuntimeError(Exception):
    """
    Raised when an operator is applied to operands of the wrong type.

    Caught by Interpreter.interpret(), which reports it and prints nothing.
    """

    def __init__(
        self,
        token: Token,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.token = token
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            line=token.line,
            severity="error",
            phase="runtime",
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


RUNTIME_ERROR_CODES = {
    "R001": "Operand must be a number",
    "R002": "Operands must be numbers",
    "R003": "Operands must be two numbers or two strings",
    "R004": "Expression nested too deeply",
}


def create_number_operand_error(operator: Token) -> LoxRuntimeError:
    """Create an error for a unary operator applied to a non-number."""
    return LoxRuntimeError(
        operator,
        "Operand must be a number.",
        code="R001",
        help_text=f"'{operator.lexeme}' only applies to numbers."
    )


def create_number_operands_error(operator: Token) -> LoxRuntimeError:
    """Create an error for an arithmetic/comparison operator with a non-number side."""
    return LoxRuntimeError(
        operator,
        "Operands must be numbers.",
        code="R002",
        help_text=f"Both sides of '{operator.lexeme}' must be numbers."
    )


def create_plus_operands_error(operator: Token) -> LoxRuntimeError:
    """Create an error for '+' with mixed or unsupported operands."""
    return LoxRuntimeError(
        operator,
        "Operands must be two numbers or two strings.",
        code="R003",
        help_text="'+' adds two numbers or concatenates two strings; there is no implicit conversion."
    )


def create_nesting_too_deep_error(operator: Token) -> LoxRuntimeError:
    """Create an error for an expression too deep to evaluate recursively."""
    return LoxRuntimeError(
        operator,
        "Expression nested too deeply.",
        code="R004",
        help_text="Split the expression into smaller parts."
    )
