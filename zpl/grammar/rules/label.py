"""
Label control commands - ^XA, ^XZ, ^LL, ^LH.
"""

from zpl.grammar.context import ParseContext
from zpl.grammar.grammar_map import GrammarMap
from zpl.grammar.rules.base import GrammarRule, param_at, parse_int
from zpl.lexer import Token
from zpl.syntax_tree.nodes import (
    LabelEndNode,
    LabelHomeNode,
    LabelLengthNode,
    LabelStartNode,
)


@GrammarMap.register
class LabelStartRule(GrammarRule):
    """
    Start of a label.

    Usage:
        ^XA
    """

    codes = ("XA",)

    def parse(self, ctx: ParseContext, start: Token, code_token: Token) -> LabelStartNode:
        return LabelStartNode(**self.base_fields(start, code_token, ctx.take_parameters()))


@GrammarMap.register
class LabelEndRule(GrammarRule):
    """
    End of a label. Takes no parameters; stray ones are left to the driver.

    Usage:
        ^XZ
    """

    codes = ("XZ",)

    def parse(self, ctx: ParseContext, start: Token, code_token: Token) -> LabelEndNode:
        return LabelEndNode(**self.base_fields(start, code_token))


@GrammarMap.register
class LabelLengthRule(GrammarRule):
    """
    Label length.

    Usage:
        ^LL1200
        ^LL          # configured default (100)
    """

    codes = ("LL",)

    def parse(self, ctx: ParseContext, start: Token, code_token: Token) -> LabelLengthNode:
        parameters = ctx.take_parameters()
        length = parse_int(param_at(parameters, 0), ctx.config.default_label_length)
        return LabelLengthNode(
            **self.base_fields(start, code_token, parameters), length=length
        )


@GrammarMap.register
class LabelHomeRule(GrammarRule):
    """
    Label home offset. Both coordinates are required.

    Usage:
        ^LH30,30
    """

    codes = ("LH",)

    def parse(self, ctx: ParseContext, start: Token, code_token: Token) -> LabelHomeNode:
        parameters = ctx.take_parameters()
        if len(parameters) < 2:
            ctx.add_error("LH command requires x and y parameters", start.position)

        return LabelHomeNode(
            **self.base_fields(start, code_token, parameters),
            x=parse_int(param_at(parameters, 0), 0),
            y=parse_int(param_at(parameters, 1), 0),
        )
