"""
loxexpr recursive descent expression parser.

One method per precedence level, lowest first; each calls the next
tighter level and loops while the current token is one of its operators.

    expression  -> comma
    comma       -> conditional ( "," expression )?
    conditional -> equality ( "?" conditional ":" conditional )?
    equality    -> comparison ( ( "!=" | "==" ) comparison )*
    comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        -> factor ( ( "-" | "+" ) factor )*
    factor      -> unary ( ( "/" | "*" ) unary )*
    unary       -> ( "!" | "-" ) unary | primary
    primary     -> "false" | "true" | "nil" | NUMBER | STRING
                 | "(" expression ")"
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from ..lexer.tokens import Token, TokenType, SourceLocation
from .ast_nodes import Expression, Binary, Grouping, Literal, Unary, SourceSpan
from .errors import (
    ParseError, ParseWarning, SyntaxErrorRecovery, create_missing_token_error,
    create_expect_expression_error, create_missing_operand_warning
)
from .reporting import LoggingReporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Missing:
    """
    Result of a grammar level that found no expression at all.

    Not an AST node: callers check for it straight away and either
    recover (additive operators) or turn it into a fatal error.
    """
    message: str


Parsed = Union[Expression, Missing]


class ExpressionParser:
    """
    Recursive descent parser for a single expression.

    Fatal errors are reported as soon as they happen and make parse()
    return None. Recoverable ones are buffered and only handed to the
    reporter once the whole parse has succeeded.
    """

    def __init__(self, tokens: List[Token], reporter=None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens, terminated by an EOF token
            reporter: Object with a report(token, message) method;
                defaults to a LoggingReporter
        """
        self.tokens = tokens
        self.current = 0
        self.reporter = reporter if reporter is not None else LoggingReporter()
        self.errors: List[ParseError] = []
        self.warnings: List[ParseWarning] = []

    def parse(self) -> Optional[Expression]:
        """
        Parse the token stream into an expression tree.

        Returns:
            The root expression, or None if a fatal error occurred
        """
        try:
            expr = self._require(self._expression(), self._peek())
        except ParseError as error:
            self.errors.append(error)
            logger.debug("parse aborted at %s, dropping %d buffered warning(s)",
                         error.diagnostic.location, len(self.warnings))
            self.warnings.clear()
            return None

        for warning in self.warnings:
            self.reporter.report(warning.token, warning.message)

        return expr

    def has_errors(self) -> bool:
        """Check if the last parse hit a fatal error."""
        return len(self.errors) > 0

    # Grammar levels, lowest precedence first

    def _expression(self) -> Parsed:
        return self._comma()

    def _comma(self) -> Parsed:
        """Comma operator: the left operand is evaluated and discarded."""
        expr = self._conditional()

        if self._match(TokenType.COMMA):
            expr = self._expression()

        return expr

    def _conditional(self) -> Parsed:
        """Right-associative ternary, encoded as two nested Binary nodes."""
        expr = self._equality()

        if self._match(TokenType.QUESTION_MARK):
            condition = self._require(expr, self._previous())
            question = self._previous()
            then_branch = self._require(self._conditional(), self._peek())
            then_expr = Binary(condition, question, then_branch,
                               SourceSpan(condition.span.start, then_branch.span.end))

            self._consume(TokenType.COLON, "Expect ':' after '?'.")
            colon = self._previous()
            else_branch = self._require(self._conditional(), self._peek())
            return Binary(then_expr, colon, else_branch,
                          SourceSpan(condition.span.start, else_branch.span.end))

        return expr

    def _equality(self) -> Parsed:
        return self._binary_level(self._comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def _comparison(self) -> Parsed:
        return self._binary_level(self._term, TokenType.GREATER, TokenType.GREATER_EQUAL,
                                  TokenType.LESS, TokenType.LESS_EQUAL)

    def _term(self) -> Parsed:
        """
        Additive level, the only place a missing left operand is tolerated.

        '+ 3' records a warning at the '+', drops it and parses '3' as a
        fresh expression.
        """
        expr = self._factor()

        while self._match(TokenType.MINUS, TokenType.PLUS):
            operator = self._previous()
            if isinstance(expr, Missing):
                self.warnings.append(create_missing_operand_warning(operator))
                logger.debug("no left operand for '%s' at %s, reparsing from the next token",
                             operator.lexeme, operator.location)
                return self._expression()

            right = self._require(self._factor(), self._peek())
            expr = Binary(expr, operator, right, SourceSpan(expr.span.start, right.span.end))

        return expr

    def _factor(self) -> Parsed:
        return self._binary_level(self._unary, TokenType.SLASH, TokenType.STAR)

    def _unary(self) -> Parsed:
        if self._match(TokenType.BANG, TokenType.MINUS):
            operator = self._previous()
            right = self._require(self._unary(), self._peek())
            return Unary(operator, right, SourceSpan(operator.location, right.span.end))

        return self._primary()

    def _primary(self) -> Parsed:
        if self._match(TokenType.FALSE):
            return self._literal(False)
        if self._match(TokenType.TRUE):
            return self._literal(True)
        if self._match(TokenType.NIL):
            return self._literal(None)

        if self._match(TokenType.NUMBER, TokenType.STRING):
            return self._literal(self._previous().value)

        if self._match(TokenType.LEFT_PAREN):
            left_paren = self._previous()
            expr = self._require(self._expression(), self._peek())
            right_paren = self._consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr, SourceSpan(left_paren.location, right_paren.location))

        return Missing("There's nothing here.")

    # Helpers

    def _binary_level(self, operand, *operators: TokenType) -> Parsed:
        """Left-associative loop shared by the levels without recovery."""
        expr = operand()

        while self._match(*operators):
            operator = self._previous()
            left = self._require(expr, operator)
            right = self._require(operand(), self._peek())
            expr = Binary(left, operator, right, SourceSpan(left.span.start, right.span.end))

        return expr

    def _literal(self, value) -> Literal:
        token = self._previous()
        return Literal(value, SourceSpan(token.location, token.location))

    def _require(self, result: Parsed, token: Token) -> Expression:
        """Turn a Missing result into a fatal error reported at token."""
        if isinstance(result, Missing):
            raise self._error(create_expect_expression_error(token))
        return result

    def _error(self, error: ParseError) -> ParseError:
        """Report a fatal error immediately and hand it back for raising."""
        self.reporter.report(error.token, error.diagnostic.message)
        return error

    def synchronize(self) -> None:
        """
        Skip tokens until a likely statement boundary.

        Stops just after a ';' or just before a keyword that starts a
        statement. Expression parsing never calls this; it is here for a
        statement grammar layered on top.
        """
        self._advance()

        while not self._is_at_end():
            if self._previous().type == TokenType.SEMICOLON:
                return
            if self._peek().type in SyntaxErrorRecovery.STATEMENT_STARTS:
                return
            self._advance()

    # Utility methods

    def _match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it is any of token_types."""
        for token_type in token_types:
            if self._check(token_type):
                self._advance()
                return True
        return False

    def _check(self, token_type: TokenType) -> bool:
        """Check if current token matches type without consuming."""
        if self._is_at_end():
            return False
        return self._peek().type == token_type

    def _advance(self) -> Token:
        """Consume and return current token."""
        if not self._is_at_end():
            self.current += 1
        return self._previous()

    def _is_at_end(self) -> bool:
        return self._peek().type == TokenType.EOF

    def _peek(self) -> Token:
        """Return current token without consuming."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        # Tolerate token lists without a trailing EOF
        return Token(TokenType.EOF, "", None, SourceLocation("<eof>", 0, 0, 0))

    def _previous(self) -> Token:
        """Return previous token."""
        if self.current > 0:
            return self.tokens[self.current - 1]
        return self._peek()

    def _consume(self, token_type: TokenType, message: str) -> Token:
        """Consume token of expected type or report and raise."""
        if self._check(token_type):
            return self._advance()

        raise self._error(create_missing_token_error(token_type, self._peek(), message))


def parse_string(source: str, filename: str = "<string>", reporter=None) -> Optional[Expression]:
    """
    Convenience function to parse a source string.

    Args:
        source: Expression source code
        filename: Filename for error reporting
        reporter: Diagnostic sink passed to the parser

    Returns:
        Expression tree, or None if parsing failed

    Raises:
        LexerError: If the source cannot be tokenized
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename)
    return ExpressionParser(tokens, reporter).parse()


def parse_file(filepath: str, reporter=None) -> Optional[Expression]:
    """
    Convenience function to parse a source file.

    Raises:
        LexerError: If the source cannot be tokenized
        OSError: If file cannot be read
    """
    from ..lexer import tokenize_file

    tokens = tokenize_file(filepath)
    return ExpressionParser(tokens, reporter).parse()
