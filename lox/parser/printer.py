"""
AST pretty-printer.

Renders an expression tree in parenthesized prefix form, e.g.
``-123 * (45.67)`` becomes ``(* (- 123) (group 45.67))``. Used by the
CLI's --ast dump and handy in tests for checking tree shape.
"""

from .ast_nodes import Binary, Expr, ExprVisitor, Grouping, Literal, Unary
from ..values import stringify


class AstPrinter(ExprVisitor[str]):
    """Expression visitor producing a Lisp-like string."""

    def print(self, expr: Expr) -> str:
        return expr.accept(self)

    def visit_binary_expr(self, expr: Binary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr: Grouping) -> str:
        return self._parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr: Literal) -> str:
        if isinstance(expr.value, str):
            return f'"{expr.value}"'
        return stringify(expr.value)

    def visit_unary_expr(self, expr: Unary) -> str:
        return self._parenthesize(expr.operator.lexeme, expr.right)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"
