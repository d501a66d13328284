"""
Tests for the generic fallback rule.
"""

from zpl.grammar.rules.generic import UNDEFINED_GRAMMAR_CODES
from zpl.syntax_tree.nodes import GenericCommandNode


class TestGenericCommand:
    """Tests for commands without a grammar rule."""

    def test_parameters_positional(self, parser):
        node = parser.parse("^PQ1,0,1,Y,1").commands[0]

        assert isinstance(node, GenericCommandNode)
        assert node.code == "PQ"
        assert node.raw == "^PQ"
        assert node.parameters == ["1", "0", "1", "Y", "1"]

    def test_duplicates_kept(self, parser):
        node = parser.parse("^PQ1,1,1").commands[0]

        assert node.parameters == ["1", "1", "1"]

    def test_suggestion_for_regular_code(self, parser):
        warning = parser.parse("^PW400").warnings[0]

        assert warning.suggestion == "Parameters are kept as raw values"

    def test_undefined_grammar_codes(self):
        assert UNDEFINED_GRAMMAR_CODES == {"FR", "CF", "GF"}
