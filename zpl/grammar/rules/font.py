"""
Font selection command - ^A.
"""

from zpl.grammar.context import ParseContext
from zpl.grammar.grammar_map import GrammarMap
from zpl.grammar.rules.base import GrammarRule, param_at, parse_int
from zpl.lexer import Token
from zpl.syntax_tree.nodes import FontSelectionNode, Orientation

DEFAULT_FONT = "0"
DEFAULT_HEIGHT = 10


@GrammarMap.register
class FontSelectionRule(GrammarRule):
    """
    Font selection. The lexer splits the font letter off the code, so
    ^ADN,36,20 arrives as parameters D, N, 36, 20.

    Usage:
        ^Afo,h,w
    """

    codes = ("A",)

    def parse(self, ctx: ParseContext, start: Token, code_token: Token) -> FontSelectionNode:
        parameters = ctx.take_parameters()

        height = parse_int(param_at(parameters, 2), DEFAULT_HEIGHT)
        width = param_at(parameters, 3)
        return FontSelectionNode(
            **self.base_fields(start, code_token, parameters),
            font=param_at(parameters, 0) or DEFAULT_FONT,
            orientation=Orientation.parse(param_at(parameters, 1)),
            height=height,
            width=parse_int(width, height) if width is not None else None,
        )
