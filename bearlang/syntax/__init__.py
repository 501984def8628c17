"""
Syntax tree module for bearlang.

This module defines the tree nodes built by the parser and the functions
that render them back to text.
"""

from .nodes import (
    # Expressions
    Identifier,
    IntegerLiteral,
    Boolean,
    PrefixExpression,
    InfixExpression,
    Expr,
    # Statements
    LetStatement,
    ReturnStatement,
    ExpressionStatement,
    Stmt,
    # Root
    Program,
    Node,
)
from .render import render, token_literal

__all__ = [
    # Expressions
    "Identifier",
    "IntegerLiteral",
    "Boolean",
    "PrefixExpression",
    "InfixExpression",
    "Expr",
    # Statements
    "LetStatement",
    "ReturnStatement",
    "ExpressionStatement",
    "Stmt",
    # Root
    "Program",
    "Node",
    # Rendering
    "render",
    "token_literal",
]
