"""
Tests for graphic box command - ^GB.
"""

from zpl.syntax_tree.nodes import GraphicBoxNode, LineColor


class TestGraphicBox:
    """Tests for ^GB."""

    def test_all_parameters(self, parser):
        node = parser.parse("^GB400,100,10,B,0").commands[0]

        assert isinstance(node, GraphicBoxNode)
        assert (node.width, node.height, node.thickness) == (400, 100, 10)
        assert node.color is LineColor.BLACK
        assert node.rounding == 0

    def test_defaults(self, parser):
        node = parser.parse("^GB").commands[0]

        assert (node.width, node.height, node.thickness) == (1, 1, 1)
        assert node.color is LineColor.BLACK
        assert node.rounding is None

    def test_white(self, parser):
        node = parser.parse("^GB10,20,3,W").commands[0]

        assert node.color is LineColor.WHITE
        assert node.rounding is None

    def test_unknown_color_is_black(self, parser):
        node = parser.parse("^GB10,20,3,X,5").commands[0]

        assert node.color is LineColor.BLACK
        assert node.rounding == 5

    def test_non_numeric_rounding(self, parser):
        """Present but unparseable rounding falls back to 0."""
        node = parser.parse("^GB10,20,3,B,abc").commands[0]

        assert node.rounding == 0
