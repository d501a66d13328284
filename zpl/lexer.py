"""
Lexer module for tokenizing ZPL source text.

This module scans label markup into a flat token stream, handling
command markers, comma separated parameter lists, free-form field
data content, comments and line breaks.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto

from zpl.diagnostics import TOKENIZER_ERROR, Diagnostic, LexerError, Severity

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types for the ZPL lexer."""

    COMMAND_START = auto()  # ^
    COMMAND_CODE = auto()  # XA, FO, FD, ...
    PARAMETER = auto()  # 50, N, Y, ...
    STRING_CONTENT = auto()  # text following ^FD
    COMMENT = auto()  # // ... or /* ... */
    NEWLINE = auto()
    EOF = auto()


COMMAND_MARKER = "^"
PARAMETER_SEPARATOR = ","
WHITESPACE = " \t\r\f\v"

# Width of a regular command code
CODE_WIDTH = 2

# Codes followed by free-form content instead of a parameter list
CONTENT_CODES = frozenset({"FD"})

# ^Afo,h,w - the font designator is glued to the command letter
FONT_CODE = "A"


def is_command_char(char: str) -> bool:
    """Return True for characters allowed in a command code."""
    return ("A" <= char <= "Z") or ("0" <= char <= "9") or char == "@"


@dataclass(frozen=True)
class Position:
    """Location in source text. line/column are 1-based, offset is 0-based."""

    line: int = 1
    column: int = 1
    offset: int = 0

    def shifted(self, count: int = 1) -> "Position":
        """Return the position `count` characters further on the same line."""
        return Position(self.line, self.column + count, self.offset + count)


@dataclass
class Token:
    """A single token produced by the lexer."""

    type: TokenType
    value: str
    position: Position
    raw: str = ""

    def __repr__(self) -> str:
        return (
            f"Token({self.type.name}, {self.value!r}, "
            f"line={self.position.line}, col={self.position.column})"
        )


class ZplLexer:
    """
    Tokenizer for ZPL label markup.

    Handles:
    - Command markers (^) followed by a command code
    - Comma separated parameters up to the next marker or line break
    - Field data content (^FD...) including commas, spaces and line breaks
    - Line (//) and block (/* */) comments outside of commands
    - Line breaks, emitted as NEWLINE tokens

    The lexer never raises on bad input. Unexpected characters are
    recorded as diagnostics and skipped so scanning always moves forward.
    """

    def __init__(self, source: str):
        if not isinstance(source, str):
            raise LexerError(f"Source must be str, got {type(source).__name__}")
        self.source = source
        self.length = len(source)
        self._reset()

    def _reset(self) -> None:
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []
        self.errors: list[Diagnostic] = []

    def _current_char(self) -> str | None:
        """Return current character or None if at end."""
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def _peek_char(self, offset: int = 1) -> str | None:
        """Peek at character at given offset from current position."""
        peek_pos = self.pos + offset
        if peek_pos >= self.length:
            return None
        return self.source[peek_pos]

    def _advance(self) -> str | None:
        """Advance position and return the character."""
        char = self._current_char()
        if char is not None:
            self.pos += 1
            if char == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
        return char

    def _position(self) -> Position:
        return Position(self.line, self.column, self.pos)

    def _emit(self, token_type: TokenType, value: str, position: Position) -> None:
        self.tokens.append(Token(token_type, value, position, value))

    def _error(self, message: str, position: Position | None = None) -> None:
        self.errors.append(
            Diagnostic(
                message=message,
                position=position or self._position(),
                severity=Severity.ERROR,
                code=TOKENIZER_ERROR,
            )
        )

    def _read_command(self) -> None:
        """Read a marker and its command code, then whatever follows the code."""
        start = self._position()
        self._advance()  # skip marker

        chars: list[str] = []
        while len(chars) < CODE_WIDTH:
            char = self._current_char()
            if char is None or not is_command_char(char):
                break
            chars.append(char)
            self._advance()
            if chars == [FONT_CODE]:
                nxt = self._current_char()
                if nxt is not None and nxt != "@" and is_command_char(nxt):
                    break

        if not chars:
            self._error(f"Empty command after {COMMAND_MARKER}", start)
            return

        code = "".join(chars)
        self._emit(TokenType.COMMAND_START, COMMAND_MARKER, start)
        self._emit(TokenType.COMMAND_CODE, code, start.shifted())

        if code in CONTENT_CODES:
            self._read_content()
            return

        if code == FONT_CODE:
            char = self._current_char()
            if char is not None and is_command_char(char):
                self._emit(TokenType.PARAMETER, char, self._position())
                self._advance()

        self._read_parameters()

    def _read_parameters(self) -> None:
        """Read comma separated parameters up to the next marker or line break."""
        while True:
            char = self._current_char()
            if char is None or char == COMMAND_MARKER or char == "\n":
                return
            if char == PARAMETER_SEPARATOR or char in WHITESPACE:
                self._advance()
                continue

            start = self._position()
            chars: list[str] = []
            while True:
                char = self._current_char()
                if (
                    char is None
                    or char == COMMAND_MARKER
                    or char == "\n"
                    or char == PARAMETER_SEPARATOR
                    or char in WHITESPACE
                ):
                    break
                chars.append(char)
                self._advance()
            self._emit(TokenType.PARAMETER, "".join(chars), start)

    def _read_content(self) -> None:
        """
        Read field data content up to the next command marker.

        Spaces before the marker belong to the content. A trailing run of
        whitespace that contains a line break is left for the main loop so
        that NEWLINE tokens are still produced for it.
        """
        end = self.source.find(COMMAND_MARKER, self.pos)
        if end == -1:
            end = self.length
        text = self.source[self.pos:end]
        stripped = text.rstrip(WHITESPACE + "\n")
        if "\n" in text[len(stripped):]:
            text = stripped
        if not text:
            return

        start = self._position()
        for _ in range(len(text)):
            self._advance()
        self._emit(TokenType.STRING_CONTENT, text, start)

    def _read_line_comment(self) -> None:
        start = self._position()
        chars: list[str] = []
        while self._current_char() is not None and self._current_char() != "\n":
            chars.append(self.source[self.pos])
            self._advance()
        self._emit(TokenType.COMMENT, "".join(chars), start)

    def _read_block_comment(self) -> None:
        start = self._position()
        self._advance()  # /
        self._advance()  # *
        while self._current_char() is not None:
            if self._current_char() == "*" and self._peek_char() == "/":
                self._advance()
                self._advance()
                break
            self._advance()
        self._emit(TokenType.COMMENT, self.source[start.offset:self.pos], start)

    def tokenize(self) -> tuple[list[Token], list[Diagnostic]]:
        """Tokenize the entire source string.

        Returns the token stream, always terminated by a single EOF token,
        and the list of lexical errors found along the way.
        """
        self._reset()

        while self.pos < self.length:
            char = self.source[self.pos]

            if char == COMMAND_MARKER:
                self._read_command()
                continue

            if char == "\n":
                self._emit(TokenType.NEWLINE, "\n", self._position())
                self._advance()
                continue

            if char == "/" and self._peek_char() == "/":
                self._read_line_comment()
                continue

            if char == "/" and self._peek_char() == "*":
                self._read_block_comment()
                continue

            if char in WHITESPACE:
                self._advance()
                continue

            self._error(f"Unexpected character: {char!r}")
            self._advance()

        self.tokens.append(Token(TokenType.EOF, "EOF", self._position(), ""))

        logger.debug(
            f"Tokenized {self.length} chars into {len(self.tokens)} tokens "
            f"({len(self.errors)} errors)"
        )
        return self.tokens, self.errors


def tokenize(source: str) -> tuple[list[Token], list[Diagnostic]]:
    """Tokenize `source` with a fresh lexer."""
    return ZplLexer(source).tokenize()
