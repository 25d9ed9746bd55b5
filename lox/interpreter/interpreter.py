"""
Tree-walking interpreter for Lox expressions.

Evaluates an expression tree to a runtime value and prints it. Operand
types are checked before every operator is applied, so bad operands become
a reported LoxRuntimeError rather than a Python TypeError.

Author: xwest
"""

import math
import operator
import sys
from typing import Any, Callable, Dict, Optional, TextIO, TYPE_CHECKING

from ..lexer.tokens import Token, TokenType
from ..parser.ast_nodes import Binary, Expr, ExprVisitor, Grouping, Literal, LoxValue, Unary
from .errors import (
    LoxRuntimeError, create_nesting_too_deep_error, create_number_operand_error,
    create_number_operands_error, create_plus_operands_error
)
from ..values import is_equal, is_number, is_string, is_truthy, stringify

if TYPE_CHECKING:
    from ..reporting import ErrorReporter


def _divide(left: float, right: float) -> float:
    """IEEE-754 division: x/0 is an infinity (or NaN), not an exception."""
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _outermost_operator(expr: Expr) -> Token:
    """Operator token at the top of the tree, skipping enclosing groupings."""
    while isinstance(expr, Grouping):
        expr = expr.expression
    if isinstance(expr, (Binary, Unary)):
        return expr.operator
    # A bare literal carries no token
    return Token(TokenType.EOF, "", None, 1)


# Operators that need two numbers
ARITHMETIC_OPERATORS: Dict[TokenType, Callable[[float, float], Any]] = {
    TokenType.MINUS: operator.sub,
    TokenType.STAR: operator.mul,
    TokenType.SLASH: _divide,
    TokenType.GREATER: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.LESS: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
}


class Interpreter(ExprVisitor[LoxValue]):
    """
    Evaluates expression trees.

    Holds no state between inputs beyond where it reports errors and where
    it prints values, so one instance can serve every line of a REPL.
    """

    def __init__(self, reporter: Optional["ErrorReporter"] = None,
                 output: Optional[TextIO] = None):
        """
        Args:
            reporter: Error sink for runtime errors; when None they propagate
            output: Stream values are printed to (stdout when None)
        """
        self.reporter = reporter
        self._output = output

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def interpret(self, expr: Expr):
        """Evaluate an expression and print its value, or report the failure."""
        try:
            value = self.evaluate(expr)
        except LoxRuntimeError as e:
            error = e
        except RecursionError:
            error = create_nesting_too_deep_error(_outermost_operator(expr))
        else:
            print(stringify(value), file=self.output)
            return

        if self.reporter is None:
            raise error
        self.reporter.runtime_error(error)

    def evaluate(self, expr: Expr) -> LoxValue:
        """Evaluate an expression to a runtime value."""
        return expr.accept(self)

    def visit_literal_expr(self, expr: Literal) -> LoxValue:
        return expr.value

    def visit_grouping_expr(self, expr: Grouping) -> LoxValue:
        return self.evaluate(expr.expression)

    def visit_unary_expr(self, expr: Unary) -> LoxValue:
        right = self.evaluate(expr.right)
        op_type = expr.operator.type

        if op_type == TokenType.BANG:
            return not is_truthy(right)
        if op_type == TokenType.MINUS:
            self._check_number_operand(expr.operator, right)
            return -right

        raise LoxRuntimeError(expr.operator, f"Unknown unary operator '{expr.operator.lexeme}'.")

    def visit_binary_expr(self, expr: Binary) -> LoxValue:
        # Both sides are evaluated before any type check, left first
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op_type = expr.operator.type

        if op_type == TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if op_type == TokenType.BANG_EQUAL:
            return not is_equal(left, right)

        if op_type == TokenType.PLUS:
            if is_number(left) and is_number(right):
                return left + right
            if is_string(left) and is_string(right):
                return left + right
            raise create_plus_operands_error(expr.operator)

        apply = ARITHMETIC_OPERATORS.get(op_type)
        if apply is None:
            raise LoxRuntimeError(expr.operator, f"Unknown binary operator '{expr.operator.lexeme}'.")

        self._check_number_operands(expr.operator, left, right)
        return apply(left, right)

    def _check_number_operand(self, operator_token: Token, operand: LoxValue):
        if not is_number(operand):
            raise create_number_operand_error(operator_token)

    def _check_number_operands(self, operator_token: Token, left: LoxValue, right: LoxValue):
        if not (is_number(left) and is_number(right)):
            raise create_number_operands_error(operator_token)
