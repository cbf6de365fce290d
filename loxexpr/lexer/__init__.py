"""
loxexpr Lexer Package

Lexical analyzer for the expression language. The parser consumes the
token list it produces; any other producer of Token lists works too.
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
