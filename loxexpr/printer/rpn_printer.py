"""
Reverse Polish (postfix) rendering of expression trees.
"""

from typing import Any

from ..lexer.tokens import TokenType
from ..parser.ast_nodes import ASTVisitor, Expression, Binary, Grouping, Literal, Unary

# '-' is ambiguous in postfix (binary or unary), so negation gets its own name
NEGATE = "NEGATE"


def format_literal(value: Any) -> str:
    """Textual form of a literal value: nil, true/false, 2 rather than 2.0."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class RpnPrinter(ASTVisitor):
    """
    Renders a tree in postfix order: operands first, then the operator.

    Parentheses have no postfix symbol, so a Grouping renders exactly as
    the expression inside it.
    """

    def print(self, expr: Expression) -> str:
        return self.visit(expr)

    render = print

    def visit(self, node: Expression) -> str:
        if isinstance(node, Binary):
            return self._postfix(node.operator.lexeme, node.left, node.right)
        elif isinstance(node, Grouping):
            return self._postfix("", node.expression)
        elif isinstance(node, Literal):
            return format_literal(node.value)
        elif isinstance(node, Unary):
            if node.operator.type == TokenType.MINUS:
                return self._postfix(NEGATE, node.right)
            return self._postfix(node.operator.lexeme, node.right)

        raise TypeError(f"cannot render {type(node).__name__} in postfix form")

    def _postfix(self, name: str, *exprs: Expression) -> str:
        parts = [expr.accept(self) for expr in exprs]
        if name:
            parts.append(name)
        return " ".join(parts)
