"""
Graphic box command - ^GB.
"""

from zpl.grammar.context import ParseContext
from zpl.grammar.grammar_map import GrammarMap
from zpl.grammar.rules.base import GrammarRule, param_at, parse_int
from zpl.lexer import Token
from zpl.syntax_tree.nodes import GraphicBoxNode, LineColor


@GrammarMap.register
class GraphicBoxRule(GrammarRule):
    """
    Graphic box.

    Usage:
        ^GBw,h,t,c,r
        ^GB400,100,10,B,0
    """

    codes = ("GB",)

    def parse(self, ctx: ParseContext, start: Token, code_token: Token) -> GraphicBoxNode:
        parameters = ctx.take_parameters()

        rounding = param_at(parameters, 4)
        return GraphicBoxNode(
            **self.base_fields(start, code_token, parameters),
            width=parse_int(param_at(parameters, 0), 1),
            height=parse_int(param_at(parameters, 1), 1),
            thickness=parse_int(param_at(parameters, 2), 1),
            color=LineColor.parse(param_at(parameters, 3)),
            rounding=parse_int(rounding, 0) if rounding is not None else None,
        )
