"""
loxexpr Lexer - turns expression source text into tokens

The parser only ever sees the token list, so this is kept deliberately
close to the classic Lox scanner: no escapes in strings, numbers are
always floats, '//' comments run to the end of the line.
"""

import logging
import re
from typing import List, Optional

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS
from .errors import (
    LexerError, create_unexpected_character_error,
    create_unterminated_string_error
)

logger = logging.getLogger(__name__)


class Lexer:
    """
    Expression language lexical analyzer.

    Converts source code text into a list of tokens terminated by EOF,
    collecting errors instead of stopping at the first one.
    """

    def __init__(self, source: str, filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""
        self.number_pattern = re.compile(r'\d+(?:\.\d+)?', re.ASCII)
        self.identifier_pattern = re.compile(r'[A-Za-z_][A-Za-z0-9_]*')

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens including EOF token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens.clear()
        self.errors.clear()

        while self.pos < len(self.source):
            try:
                self._skip_whitespace_and_comments()

                if self.pos >= len(self.source):
                    break

                token = self._next_token()
                if token:
                    self.tokens.append(token)

            except LexerError as e:
                logger.debug("lexer error at %s: %s", e.location, e.diagnostic.message)
                self.errors.append(e)
                # Recover by skipping the problematic character
                self._advance()

        eof_location = SourceLocation(self.filename, self.line, self.column, self.pos)
        self.tokens.append(Token(TokenType.EOF, "", None, eof_location))

        return self.tokens

    def _next_token(self) -> Optional[Token]:
        """Get the next token from the source."""
        start_pos = self.pos
        location = SourceLocation(self.filename, self.line, self.column, start_pos)

        current_char = self.source[self.pos]

        # ASCII only; other letters and digits fall through to the error
        match = self.number_pattern.match(self.source, self.pos)
        if match:
            return self._tokenize_number(match.group(0), location)

        match = self.identifier_pattern.match(self.source, self.pos)
        if match:
            return self._tokenize_identifier_or_keyword(match.group(0), location)

        if current_char == '"':
            return self._tokenize_string(location)

        # Two character operators first
        for op_len in (2, 1):
            potential_op = self.source[self.pos:self.pos + op_len]
            if len(potential_op) == op_len and potential_op in OPERATORS:
                self._advance_by(op_len)
                return Token(OPERATORS[potential_op], potential_op, None, location)

        raise create_unexpected_character_error(current_char, location)

    def _tokenize_number(self, lexeme: str, location: SourceLocation) -> Token:
        """Tokenize a number literal; the value is always a float."""
        self._advance_by(len(lexeme))
        return Token(TokenType.NUMBER, lexeme, float(lexeme), location)

    def _tokenize_identifier_or_keyword(self, lexeme: str, location: SourceLocation) -> Token:
        """Tokenize an identifier or keyword."""
        self._advance_by(len(lexeme))

        token_type = KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
        value = None
        if token_type in (TokenType.TRUE, TokenType.FALSE):
            value = token_type == TokenType.TRUE

        return Token(token_type, lexeme, value, location)

    def _tokenize_string(self, location: SourceLocation) -> Token:
        """Tokenize a string literal. Strings may span lines."""
        start_pos = self.pos
        self._advance()  # Skip opening quote

        while self.pos < len(self.source) and self.source[self.pos] != '"':
            self._advance()

        if self.pos >= len(self.source):
            raise create_unterminated_string_error(location)

        self._advance()  # Skip closing quote

        lexeme = self.source[start_pos:self.pos]
        return Token(TokenType.STRING, lexeme, lexeme[1:-1], location)

    def _skip_whitespace_and_comments(self):
        """Skip whitespace, newlines and '//' comments."""
        while self.pos < len(self.source):
            if self.source[self.pos].isspace():
                self._advance()
                continue

            if self.source.startswith('//', self.pos):
                while self.pos < len(self.source) and self.source[self.pos] != '\n':
                    self._advance()
                continue

            break

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    lexer = Lexer(source, filename)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        OSError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
