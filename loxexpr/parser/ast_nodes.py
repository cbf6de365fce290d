"""
Abstract Syntax Tree node definitions for loxexpr.

Defines the closed set of expression nodes produced by the parser. Nodes
are immutable, own their children exclusively, and support the visitor
pattern. Equality is structural; source spans never take part in it.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any
from dataclasses import dataclass, field

from ..lexer.tokens import SourceLocation, Token


@dataclass(frozen=True)
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'Expression') -> Any:
        """Visit a generic AST node."""
        pass


class Expression(ABC):
    """Base class for expressions."""

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['Expression']:
        """Get all child nodes."""
        pass

    def walk(self):
        """Yield this node and all its descendants, parents first."""
        yield self
        for child in self.children():
            yield from child.walk()


@dataclass(frozen=True)
class Binary(Expression):
    """Infix operation; also encodes both legs of the conditional operator."""
    left: Expression
    operator: Token
    right: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def children(self) -> List[Expression]:
        return [self.left, self.right]


@dataclass(frozen=True)
class Grouping(Expression):
    """Parenthesized expression, kept as its own node."""
    expression: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def children(self) -> List[Expression]:
        return [self.expression]


@dataclass(frozen=True)
class Literal(Expression):
    """Literal value: float, str, bool, or None for nil."""
    value: Any
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def children(self) -> List[Expression]:
        return []


@dataclass(frozen=True)
class Unary(Expression):
    """Prefix operation ('!' or '-')."""
    operator: Token
    right: Expression
    span: Optional[SourceSpan] = field(default=None, compare=False, repr=False)

    def children(self) -> List[Expression]:
        return [self.right]
