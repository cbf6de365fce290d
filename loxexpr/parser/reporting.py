"""
Reporters: the sinks that receive parse diagnostics.

Anything with a report(token, message) method can be handed to the
parser. Two implementations are provided: one that writes through the
logging module and one that just keeps what it was given.
"""

import logging
from typing import List, Tuple

from ..lexer.tokens import Token, TokenType

logger = logging.getLogger(__name__)


def format_diagnostic(token: Token, message: str) -> str:
    """Render a diagnostic as '[line N] Error at 'x': message'."""
    if token.type == TokenType.EOF:
        where = " at end"
    else:
        where = f" at '{token.lexeme}'"
    return f"[line {token.line}] Error{where}: {message}"


class LoggingReporter:
    """Writes each diagnostic to a logger at ERROR level."""

    def __init__(self, log: logging.Logger = logger):
        self.log = log
        self.had_error = False

    def report(self, token: Token, message: str) -> None:
        self.had_error = True
        self.log.error(format_diagnostic(token, message))


class CollectingReporter:
    """Keeps every (token, message) pair in the order received."""

    def __init__(self):
        self.reports: List[Tuple[Token, str]] = []

    def report(self, token: Token, message: str) -> None:
        self.reports.append((token, message))

    @property
    def messages(self) -> List[str]:
        return [message for _, message in self.reports]

    def formatted(self) -> List[str]:
        return [format_diagnostic(token, message) for token, message in self.reports]
