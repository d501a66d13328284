"""
Command Parser - Recursive descent parser for ZPL source.

This module turns the lexer's token stream into a Document, handling:
- Dispatch from command code to its grammar rule
- Fallback to a generic node for unsupported codes
- Recovery from structural failures (synchronization)
- Derived label metadata
"""

import logging

from zpl.config import DEFAULT_CONFIG, ParserConfig
from zpl.diagnostics import ParserError
from zpl.grammar import rules as _  # noqa: F401  (registers the grammar rules)
from zpl.grammar.context import ParseContext, ParseFailure
from zpl.grammar.grammar_map import GrammarMap
from zpl.grammar.rules.generic import GenericCommandRule
from zpl.lexer import TokenType, ZplLexer
from zpl.syntax_tree.nodes import (
    CommandNode,
    Document,
    DocumentMetadata,
    FieldOriginNode,
    LabelLengthNode,
)

logger = logging.getLogger(__name__)


class ZplParser:
    """
    Recursive descent parser for ZPL.

    Grammar (simplified):
        document    := (command | NEWLINE | COMMENT | PARAMETER)* EOF
        command     := COMMAND_START COMMAND_CODE rule
        rule        := one grammar rule per code, see zpl.grammar.rules

    The parser keeps no state between calls; everything mutable lives
    in the ParseContext built by parse().
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    def parse(self, source: str) -> Document:
        """Parse ZPL source into a Document. Input problems become diagnostics."""
        if not isinstance(source, str):
            raise ParserError(f"Source must be str, got {type(source).__name__}")

        tokens, lexer_errors = ZplLexer(source).tokenize()
        ctx = ParseContext(tokens=tokens, errors=list(lexer_errors), config=self.config)

        commands: list[CommandNode] = []
        while not ctx.is_at_end():
            result = self._parse_command(ctx)
            if isinstance(result, ParseFailure):
                ctx.add_error(result.message, result.token.position)
                self._synchronize(ctx)
            elif result is not None:
                commands.append(result)

        document = Document(
            commands=commands,
            metadata=DocumentMetadata(
                source=source,
                errors=ctx.errors,
                warnings=ctx.warnings,
                label_width=self._label_width(commands),
                label_length=self._label_length(commands),
            ),
        )
        logger.debug(
            f"Parsed {len(commands)} commands from {len(tokens)} tokens "
            f"({len(ctx.errors)} errors, {len(ctx.warnings)} warnings)"
        )
        return document

    def _parse_command(self, ctx: ParseContext) -> CommandNode | ParseFailure | None:
        """Parse one command at the cursor, or skip a token that cannot start one."""
        if not ctx.match(TokenType.COMMAND_START):
            ctx.advance()
            return None

        start = ctx.previous()
        code_token = ctx.consume(TokenType.COMMAND_CODE, "Expected command code after ^")
        if isinstance(code_token, ParseFailure):
            return code_token

        rule_class = GrammarMap.get(code_token.value) or GenericCommandRule
        try:
            return rule_class().parse(ctx, start, code_token)
        except Exception as e:
            logger.debug(f"{rule_class.__name__} failed on ^{code_token.value}", exc_info=True)
            return ParseFailure(
                f"Could not parse ^{code_token.value}: {e}", code_token
            )

    def _synchronize(self, ctx: ParseContext) -> None:
        """Skip ahead to the next line break or command marker."""
        skipped_from = ctx.pos
        ctx.advance()

        while not ctx.is_at_end():
            if ctx.previous().type is TokenType.NEWLINE:
                break
            if ctx.check(TokenType.COMMAND_START):
                break
            ctx.advance()

        logger.debug(f"Synchronized from token {skipped_from} to {ctx.pos}")

    def _label_width(self, commands: list[CommandNode]) -> int | None:
        """Widest field origin plus padding."""
        origins = [
            cmd.x for cmd in commands
            if isinstance(cmd, FieldOriginNode)
        ]
        if not origins:
            return None
        return max(origins) + self.config.label_width_padding

    def _label_length(self, commands: list[CommandNode]) -> int | None:
        for cmd in commands:
            if isinstance(cmd, LabelLengthNode):
                return cmd.length
        return None


def parse(source: str, config: ParserConfig | None = None) -> Document:
    """Parse `source` with a new ZplParser."""
    return ZplParser(config).parse(source)
