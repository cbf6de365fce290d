"""
loxexpr - expression parser and postfix printer

Architecture:
    loxexpr/
    ├── lexer/      # Source text to tokens
    ├── parser/     # Tokens to expression tree, diagnostics
    └── printer/    # Expression tree to postfix / parenthesized text

License: MIT
"""

from .version import __version__

from .lexer import Lexer, Token, TokenType
from .parser import ExpressionParser, parse_string
from .printer import RpnPrinter, AstPrinter

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "ExpressionParser",
    "parse_string",
    "RpnPrinter",
    "AstPrinter",

    "__version__",
]
