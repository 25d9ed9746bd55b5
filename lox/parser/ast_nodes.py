"""
Abstract Syntax Tree node definitions for Lox expressions.

The node set is closed: Binary, Grouping, Literal and Unary. Nodes are
immutable once the parser builds them and are traversed through the
visitor pattern, so consumers (the interpreter, the AST printer) live
outside the tree.

Author: xwest
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from ..lexer.tokens import Token


# Runtime value of a Lox expression: nil, boolean, number or string
LoxValue = Union[None, bool, float, str]

R = TypeVar("R")


class ExprVisitor(ABC, Generic[R]):
    """Visitor interface with one handler per expression variant."""

    @abstractmethod
    def visit_binary_expr(self, expr: "Binary") -> R:
        pass

    @abstractmethod
    def visit_grouping_expr(self, expr: "Grouping") -> R:
        pass

    @abstractmethod
    def visit_literal_expr(self, expr: "Literal") -> R:
        pass

    @abstractmethod
    def visit_unary_expr(self, expr: "Unary") -> R:
        pass


class Expr(ABC):
    """Base class for expressions."""

    @abstractmethod
    def accept(self, visitor: ExprVisitor[R]) -> R:
        """Accept a visitor (visitor pattern)."""
        pass


@dataclass(frozen=True)
class Binary(Expr):
    """Binary operation: arithmetic, comparison or equality."""
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class Grouping(Expr):
    """Parenthesized expression."""
    expression: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_grouping_expr(self)


@dataclass(frozen=True)
class Literal(Expr):
    """Literal value expression."""
    value: Any  # LoxValue

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class Unary(Expr):
    """Prefix operation: '!' or '-'."""
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor[R]) -> R:
        return visitor.visit_unary_expr(self)
