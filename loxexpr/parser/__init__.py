"""
loxexpr Parser Package

Recursive descent parser turning a token list into an expression tree.

Key Features:
- One method per precedence level, comma operator lowest
- Right-associative conditional operator
- Recovery from a missing left operand of '+'/'-'
- Fatal errors for missing ')' and ':' that abort the whole parse
"""

from .ast_nodes import (
    ASTVisitor, SourceSpan,
    Expression, Binary, Grouping, Literal, Unary,
)
from .parser import ExpressionParser, Missing, parse_string, parse_file
from .errors import ParseError, ParseWarning
from .reporting import LoggingReporter, CollectingReporter, format_diagnostic

__all__ = [
    # Core parser
    "ExpressionParser", "Missing", "parse_string", "parse_file",

    # AST nodes
    "ASTVisitor", "SourceSpan",
    "Expression", "Binary", "Grouping", "Literal", "Unary",

    # Error handling
    "ParseError", "ParseWarning",
    "LoggingReporter", "CollectingReporter", "format_diagnostic",
]
