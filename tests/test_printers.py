"""
Test suite for the tree printers.

Trees are built by hand so these tests do not depend on the parser.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from loxexpr.lexer.tokens import Token, TokenType, SourceLocation
from loxexpr.parser.ast_nodes import Binary, Grouping, Literal, Unary
from loxexpr.parser.parser import Missing
from loxexpr.printer import AstPrinter, RpnPrinter, NEGATE, format_literal

LOCATION = SourceLocation("<test>", 1, 1, 0)


def token(token_type: TokenType, lexeme: str) -> Token:
    return Token(token_type, lexeme, None, LOCATION)


MINUS = token(TokenType.MINUS, "-")
PLUS = token(TokenType.PLUS, "+")
STAR = token(TokenType.STAR, "*")
BANG = token(TokenType.BANG, "!")


class TestRpnPrinter(unittest.TestCase):
    """Postfix rendering."""

    def setUp(self):
        self.printer = RpnPrinter()

    def test_binary(self):
        expr = Binary(Literal(2), PLUS, Literal(3))
        self.assertEqual(self.printer.print(expr), "2 3 +")

    def test_grouping_is_transparent(self):
        inner = Binary(Literal(2), PLUS, Literal(3))
        self.assertEqual(self.printer.print(Grouping(inner)), self.printer.print(inner))
        self.assertEqual(self.printer.print(Grouping(Grouping(inner))), "2 3 +")

    def test_negation_uses_distinct_symbol(self):
        negation = self.printer.print(Unary(MINUS, Literal(1)))
        subtraction = self.printer.print(Binary(Literal(1), MINUS, Literal(2)))

        self.assertEqual(negation, f"1 {NEGATE}")
        self.assertEqual(subtraction, "1 2 -")
        self.assertNotEqual(negation.split()[-1], subtraction.split()[-1])

    def test_other_unary_operators_use_lexeme(self):
        self.assertEqual(self.printer.print(Unary(BANG, Literal(True))), "true !")

    def test_nested_expression(self):
        """(-1 + 2) * (4 - 3)"""
        expr = Binary(
            Grouping(Binary(Unary(MINUS, Literal(1)), PLUS, Literal(2))),
            STAR,
            Grouping(Binary(Literal(4), MINUS, Literal(3))),
        )
        self.assertEqual(self.printer.print(expr), "1 NEGATE 2 + 4 3 - *")

    def test_render_is_pure(self):
        expr = Binary(Unary(MINUS, Literal(1.5)), STAR, Grouping(Literal("x")))
        self.assertEqual(self.printer.render(expr), self.printer.render(expr))
        self.assertEqual(RpnPrinter().render(expr), "1.5 NEGATE x *")

    def test_no_trailing_whitespace(self):
        output = self.printer.print(Grouping(Binary(Literal(1), PLUS, Grouping(Literal(2)))))
        self.assertEqual(output, output.strip())
        self.assertNotIn("  ", output)

    def test_missing_marker_is_rejected(self):
        with self.assertRaises(TypeError):
            self.printer.print(Missing("There's nothing here."))


class TestFormatLiteral(unittest.TestCase):

    def test_values(self):
        self.assertEqual(format_literal(None), "nil")
        self.assertEqual(format_literal(True), "true")
        self.assertEqual(format_literal(False), "false")
        self.assertEqual(format_literal(2.0), "2")
        self.assertEqual(format_literal(2.5), "2.5")
        self.assertEqual(format_literal("text"), "text")


class TestAstPrinter(unittest.TestCase):
    """Parenthesized rendering."""

    def test_nested_expression(self):
        expr = Binary(
            Unary(MINUS, Literal(123)),
            STAR,
            Grouping(Literal(45.67)),
        )
        self.assertEqual(AstPrinter().print(expr), "(* (- 123) (group 45.67))")

    def test_literal(self):
        self.assertEqual(AstPrinter().print(Literal(None)), "nil")


if __name__ == '__main__':
    unittest.main()
