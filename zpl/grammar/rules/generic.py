"""
Generic command - fallback for codes without a grammar rule.
"""

from zpl.grammar.context import ParseContext
from zpl.grammar.rules.base import GrammarRule
from zpl.lexer import Token
from zpl.syntax_tree.nodes import GenericCommandNode

# Known commands whose parameter layout is not defined yet:
# ^FR field reverse, ^CF change default font, ^GF graphic field.
UNDEFINED_GRAMMAR_CODES = frozenset({"FR", "CF", "GF"})


class GenericCommandRule(GrammarRule):
    """
    Keeps every parameter positionally and warns that the command is
    not supported. Not registered; the driver falls back to it.
    """

    codes = ("*",)

    def parse(self, ctx: ParseContext, start: Token, code_token: Token) -> GenericCommandNode:
        parameters = ctx.take_parameters()
        code = code_token.value

        if ctx.config.warn_unsupported:
            if code in UNDEFINED_GRAMMAR_CODES:
                suggestion = f"No grammar is defined for ^{code} yet; parameters are kept as raw values"
            else:
                suggestion = "Parameters are kept as raw values"
            ctx.add_warning(f"Unsupported command: {code}", code_token.position, suggestion)

        return GenericCommandNode(**self.base_fields(start, code_token, parameters))
