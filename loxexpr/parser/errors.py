"""
Error handling for the loxexpr parser.

Two tiers: a ParseError is fatal and unwinds the whole parse, a
ParseWarning is recorded and parsing carries on. Also provides the
statement boundaries used for resynchronization.
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType
from ..lexer.errors import Diagnostic


class ParseError(Exception):
    """
    Exception raised when the parser encounters a fatal syntax error.

    Only used to unwind the recursive descent; ExpressionParser.parse()
    catches it and returns None.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=token.location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token

    def __str__(self) -> str:
        return str(self.diagnostic)


class ParseWarning:
    """
    Represents a recoverable diagnostic that doesn't stop parsing.
    """

    def __init__(
        self,
        message: str,
        token: Token,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=token.location,
            severity="warning",
            code=code,
            help_text=help_text
        )
        self.token = token

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def __str__(self) -> str:
        return str(self.diagnostic)


class SyntaxErrorRecovery:
    """
    Token sets used when resynchronizing after a syntax error.
    """

    # Keywords that start a new statement
    STATEMENT_STARTS = {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }

    @staticmethod
    def suggest_missing_token(expected: TokenType) -> List[str]:
        """Suggest what token might be missing."""
        token_suggestions = {
            TokenType.RIGHT_PAREN: ["Add a closing parenthesis ')'"],
            TokenType.COLON: ["Add ':' followed by the else branch of the conditional"],
        }
        return list(token_suggestions.get(expected, []))


# Helper functions for creating common parser diagnostics

def create_missing_token_error(expected: TokenType, found: Token, message: str) -> ParseError:
    """Create an error for a required token that is absent."""
    return ParseError(
        message=message,
        token=found,
        code="P001",
        help_text=f"The parser expected to see {expected.name} here, but found {found.type.name} instead.",
        suggestions=SyntaxErrorRecovery.suggest_missing_token(expected)
    )


def create_expect_expression_error(found: Token) -> ParseError:
    """Create an error for a position where an operand is required."""
    return ParseError(
        message="Expect expression.",
        token=found,
        code="P002",
        help_text=f"Found {found.type.name} where an expression should start."
    )


def create_missing_operand_warning(operator: Token) -> ParseWarning:
    """Create the recoverable diagnostic for a '+'/'-' with no left operand."""
    return ParseWarning(
        message="Binary operators must have a left and right operand.",
        token=operator,
        code="P003",
        help_text=f"'{operator.lexeme}' was skipped and parsing resumed after it."
    )
