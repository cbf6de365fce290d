"""
loxexpr Printer Package

Visitors that turn an expression tree back into text.
"""

from .rpn_printer import RpnPrinter, NEGATE, format_literal
from .ast_printer import AstPrinter

__all__ = [
    "RpnPrinter",
    "AstPrinter",
    "NEGATE",
    "format_literal",
]
