"""
Field commands - ^FO and ^FD (with its closing ^FS).
"""

from zpl.grammar.context import ParseContext
from zpl.grammar.grammar_map import GrammarMap
from zpl.grammar.rules.base import GrammarRule, param_at, parse_int
from zpl.lexer import Token, TokenType
from zpl.syntax_tree.nodes import FieldDataNode, FieldOriginNode

FIELD_STOP = "FS"


def read_field_data(ctx: ParseContext) -> tuple[str | None, bool]:
    """
    Read the content of a ^FD whose code was just consumed.

    Returns the content (None when there is none) and whether an
    immediately following ^FS was found and consumed.
    """
    content = None
    if ctx.check(TokenType.STRING_CONTENT) or ctx.check(TokenType.PARAMETER):
        content = ctx.advance().value

    stop = ctx.find_command(FIELD_STOP)
    if stop is None:
        return content, False

    ctx.pos = stop + 2  # marker + code
    return content, True


@GrammarMap.register
class FieldOriginRule(GrammarRule):
    """
    Field origin. Both coordinates are required.

    Usage:
        ^FO50,50
    """

    codes = ("FO",)

    def parse(self, ctx: ParseContext, start: Token, code_token: Token) -> FieldOriginNode:
        parameters = ctx.take_parameters()
        if len(parameters) < 2:
            ctx.add_error("FO command requires x and y parameters", start.position)

        return FieldOriginNode(
            **self.base_fields(start, code_token, parameters),
            x=parse_int(param_at(parameters, 0), 0),
            y=parse_int(param_at(parameters, 1), 0),
        )


@GrammarMap.register
class FieldDataRule(GrammarRule):
    """
    Field data. A directly following ^FS is folded into this node.

    Usage:
        ^FDHello World^FS
    """

    codes = ("FD",)

    def parse(self, ctx: ParseContext, start: Token, code_token: Token) -> FieldDataNode:
        content, stop = read_field_data(ctx)
        parameters = [content] if content is not None else []

        return FieldDataNode(
            **self.base_fields(start, code_token, parameters),
            content=content or "",
            stop_command=stop,
        )
