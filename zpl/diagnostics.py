"""
Diagnostics and exceptions for the ZPL parser.

Problems found in the input are never raised. They are collected as
Diagnostic values and returned with the parsed document. The exception
classes below are reserved for misuse of the public API.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zpl.lexer import Position, Token


# Diagnostic codes
TOKENIZER_ERROR = "TOKENIZER_ERROR"
PARSER_ERROR = "PARSER_ERROR"
UNSUPPORTED_COMMAND = "UNSUPPORTED_COMMAND"


class Severity(Enum):
    """Severity of a diagnostic."""

    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass
class Diagnostic:
    """A problem found while tokenizing or parsing."""

    message: str
    position: "Position"
    severity: Severity = Severity.ERROR
    code: str = PARSER_ERROR
    suggestion: str | None = None  # warnings only

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        return (
            f"{self.severity.value} [{self.code}] {self.message} "
            f"at line {self.position.line}, column {self.position.column}"
        )


class ZplError(Exception):
    """Base class for errors raised by the zpl package."""


class LexerError(ZplError):
    """Exception raised when the lexer is used incorrectly."""

    def __init__(self, message: str, position: "Position | None" = None):
        self.position = position
        if position is not None:
            super().__init__(
                f"{message} at line {position.line}, column {position.column}"
            )
        else:
            super().__init__(message)


class ParserError(ZplError):
    """Exception raised when the parser is used incorrectly."""

    def __init__(self, message: str, token: "Token | None" = None):
        self.token = token
        if token:
            super().__init__(
                f"{message} at line {token.position.line}, column {token.position.column}"
            )
        else:
            super().__init__(message)
