"""
Text rendering for bearlang syntax trees.

`render` produces the canonical, fully parenthesized text of a node; feeding
the rendering of an expression back through the parser gives the same tree
shape. `token_literal` returns the source text of a node's origin token.
"""

from typing import Optional

from .nodes import (
    Identifier, IntegerLiteral, Boolean, PrefixExpression, InfixExpression, Expr,
    LetStatement, ReturnStatement, ExpressionStatement, Program, Node,
)


def token_literal(node: Node) -> str:
    """Return the literal text of the token a node was built from.

    For a Program this is the literal of its first statement, or "" when
    the program is empty.
    """
    if isinstance(node, Program):
        if node.statements:
            return token_literal(node.statements[0])
        return ""
    return node.token.text


def _render_optional(expr: Optional[Expr]) -> str:
    if expr is None:
        return ""
    return render(expr)


def render(node: Node) -> str:
    """Render a node back to canonical source text.

    Args:
        node: Any syntax tree node

    Returns:
        The rendered text

    Raises:
        TypeError: If ``node`` is not a syntax tree node
    """
    if isinstance(node, Program):
        return "".join(render(stmt) for stmt in node.statements)

    if isinstance(node, LetStatement):
        return (
            f"{token_literal(node)} {render(node.name)}: {node.type_tag.text} = "
            f"{_render_optional(node.value)};"
        )

    if isinstance(node, ReturnStatement):
        if node.value is None:
            return f"{token_literal(node)};"
        return f"{token_literal(node)} {render(node.value)};"

    if isinstance(node, ExpressionStatement):
        return render(node.expression)

    if isinstance(node, Identifier):
        return node.value

    if isinstance(node, (IntegerLiteral, Boolean)):
        return node.token.text

    if isinstance(node, PrefixExpression):
        return f"({node.operator}{render(node.right)})"

    if isinstance(node, InfixExpression):
        return f"({render(node.left)} {node.operator} {render(node.right)})"

    raise TypeError(f"Cannot render {type(node).__name__}")
