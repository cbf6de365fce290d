"""
Parenthesized, Lisp-like rendering of expression trees for debugging.
"""

from ..parser.ast_nodes import ASTVisitor, Expression, Binary, Grouping, Literal, Unary
from .rpn_printer import format_literal


class AstPrinter(ASTVisitor):
    """Renders '-1 * (2 + 3)' as '(* (- 1) (group (+ 2 3)))'."""

    def print(self, expr: Expression) -> str:
        return self.visit(expr)

    def visit(self, node: Expression) -> str:
        if isinstance(node, Binary):
            return self._parenthesize(node.operator.lexeme, node.left, node.right)
        elif isinstance(node, Grouping):
            return self._parenthesize("group", node.expression)
        elif isinstance(node, Literal):
            return format_literal(node.value)
        elif isinstance(node, Unary):
            return self._parenthesize(node.operator.lexeme, node.right)

        raise TypeError(f"cannot print {type(node).__name__}")

    def _parenthesize(self, name: str, *exprs: Expression) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"
