"""
Parse context - per-call cursor and diagnostic state.

A fresh ParseContext is built for every parse() call and threaded
through the grammar rules, so the parser object itself holds no
mutable state.
"""

from dataclasses import dataclass, field

from zpl.config import DEFAULT_CONFIG, ParserConfig
from zpl.diagnostics import (
    PARSER_ERROR,
    UNSUPPORTED_COMMAND,
    Diagnostic,
    Severity,
)
from zpl.lexer import Position, Token, TokenType


@dataclass
class ParseFailure:
    """A structural failure: the expected token was not found."""

    message: str
    token: Token


@dataclass
class ParseContext:
    """Token cursor plus the errors and warnings collected so far."""

    tokens: list[Token]
    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    config: ParserConfig = DEFAULT_CONFIG
    pos: int = 0

    def current(self) -> Token:
        """Get the current token."""
        return self.peek(0)

    def peek(self, offset: int = 1) -> Token:
        """Peek at token at offset from current position."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.tokens):
            return self.tokens[peek_pos]
        return self.tokens[-1]  # EOF

    def previous(self) -> Token:
        return self.tokens[self.pos - 1]

    def is_at_end(self) -> bool:
        return self.current().type is TokenType.EOF

    def advance(self) -> Token:
        """Advance and return the token that was current."""
        token = self.current()
        if not self.is_at_end():
            self.pos += 1
        return token

    def check(self, token_type: TokenType) -> bool:
        """Check if current token is of the given type (never true for EOF)."""
        if self.is_at_end():
            return False
        return self.current().type is token_type

    def match(self, *token_types: TokenType) -> bool:
        """Consume the current token if it matches any of the given types."""
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type: TokenType, message: str) -> Token | ParseFailure:
        """Consume a token of the expected type or report a failure."""
        if self.check(token_type):
            return self.advance()
        return ParseFailure(message, self.current())

    def take_parameters(self) -> list[str]:
        """Consume all consecutive parameter tokens."""
        parameters: list[str] = []
        while self.check(TokenType.PARAMETER):
            parameters.append(self.advance().value)
        return parameters

    def find_command(self, code: str, skip: tuple[TokenType, ...] = ()) -> int | None:
        """
        Look ahead for ^<code>.

        Tokens whose type is in `skip` may sit between the cursor and the
        marker. Returns the index of the marker token or None.
        """
        index = self.pos
        while index < len(self.tokens) and self.tokens[index].type in skip:
            index += 1
        if index + 1 >= len(self.tokens):
            return None
        marker, code_token = self.tokens[index], self.tokens[index + 1]
        if (
            marker.type is TokenType.COMMAND_START
            and code_token.type is TokenType.COMMAND_CODE
            and code_token.value == code
        ):
            return index
        return None

    def add_error(self, message: str, position: Position) -> Diagnostic:
        error = Diagnostic(message, position, Severity.ERROR, PARSER_ERROR)
        self.errors.append(error)
        return error

    def add_warning(
        self, message: str, position: Position, suggestion: str | None = None
    ) -> Diagnostic:
        warning = Diagnostic(
            message, position, Severity.WARNING, UNSUPPORTED_COMMAND, suggestion
        )
        self.warnings.append(warning)
        return warning
