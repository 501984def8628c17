"""
Syntax tree node definitions for bearlang.

This module contains the data classes produced by the parser. Every node
keeps the token it was built from so later stages can report on it.
"""

from dataclasses import dataclass
from typing import List, Union, Optional

from ..frontend.lexer import Token


# ==================== Expressions ====================

@dataclass(frozen=True)
class Identifier:
    """Identifier expression.

    Attributes:
        token: The IDENTIFIER token
        value: The identifier name
    """
    token: Token
    value: str


@dataclass(frozen=True)
class IntegerLiteral:
    """Integer literal expression.

    Attributes:
        token: The INT token
        value: The value as a signed 64-bit integer
    """
    token: Token
    value: int


@dataclass(frozen=True)
class Boolean:
    """Boolean literal expression (true / false)."""
    token: Token
    value: bool


@dataclass(frozen=True)
class PrefixExpression:
    """Unary prefix expression (-x, !x, ~x).

    Attributes:
        token: The operator token
        operator: The operator text
        right: Operand expression
    """
    token: Token
    operator: str
    right: "Expr"


@dataclass(frozen=True)
class InfixExpression:
    """Binary infix expression.

    Attributes:
        token: The operator token
        left: Left operand expression
        operator: The operator text ("+", "-", "*", "/", "==", "!=", "<", ">")
        right: Right operand expression
    """
    token: Token
    left: "Expr"
    operator: str
    right: "Expr"


# Union type for all expressions
Expr = Union[
    Identifier,
    IntegerLiteral,
    Boolean,
    PrefixExpression,
    InfixExpression,
]


# ==================== Statements ====================

@dataclass(frozen=True)
class LetStatement:
    """Typed variable binding (let name: type = value;).

    Attributes:
        token: The `let` token
        name: Bound identifier
        type_tag: The type-tag token (i8 ... u128, f32, f64, bool)
        value: Initializer expression, None when not captured
    """
    token: Token
    name: Identifier
    type_tag: Token
    value: Optional[Expr] = None


@dataclass(frozen=True)
class ReturnStatement:
    """Return statement.

    Attributes:
        token: The `return` token
        value: Return value expression, None when absent or not captured
    """
    token: Token
    value: Optional[Expr] = None


@dataclass(frozen=True)
class ExpressionStatement:
    """A bare expression used as a statement.

    Attributes:
        token: First token of the expression
        expression: The wrapped expression
    """
    token: Token
    expression: Expr


# Union type for all statements
Stmt = Union[
    LetStatement,
    ReturnStatement,
    ExpressionStatement,
]


# ==================== Root ====================

@dataclass(frozen=True)
class Program:
    """Root of the syntax tree.

    Attributes:
        statements: Top-level statements in source order
    """
    statements: List[Stmt]


Node = Union[Program, Stmt, Expr]
