"""
Barcode commands - ^BC (Code 128), ^B3 (Code 39), ^BN.
"""

from zpl.grammar.context import ParseContext
from zpl.grammar.grammar_map import GrammarMap
from zpl.grammar.rules.base import GrammarRule, param_at, parse_bool, parse_int
from zpl.grammar.rules.field import read_field_data
from zpl.lexer import Token, TokenType
from zpl.syntax_tree.nodes import BarcodeNode, Orientation

FIELD_DATA = "FD"
DEFAULT_HEIGHT = 10

# Tokens allowed between a barcode command and its ^FD
_LOOKAHEAD_SKIP = (TokenType.NEWLINE, TokenType.COMMENT)


@GrammarMap.register
class BarcodeRule(GrammarRule):
    """
    Barcode field. The ^FD (and its ^FS) that follows is consumed and
    becomes the barcode data.

    Usage:
        ^BCo,h,f,g,e
        ^BCN,100,Y,N,N
        ^FD123456789^FS
    """

    codes = ("BC", "B3", "BN")

    def parse(self, ctx: ParseContext, start: Token, code_token: Token) -> BarcodeNode:
        parameters = ctx.take_parameters()

        data = ""
        field_data = ctx.find_command(FIELD_DATA, skip=_LOOKAHEAD_SKIP)
        if field_data is not None:
            ctx.pos = field_data + 2  # marker + code
            content, _ = read_field_data(ctx)
            data = content or ""

        return BarcodeNode(
            **self.base_fields(start, code_token, parameters),
            orientation=Orientation.parse(param_at(parameters, 0)),
            height=parse_int(param_at(parameters, 1), DEFAULT_HEIGHT),
            print_interpretation_line=parse_bool(param_at(parameters, 2), True),
            print_above_code=parse_bool(param_at(parameters, 3), False),
            mode=param_at(parameters, 4),
            data=data,
        )
