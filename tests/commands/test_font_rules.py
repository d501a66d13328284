"""
Tests for font selection command - ^A.
"""

from zpl.syntax_tree.nodes import FontSelectionNode, Orientation


class TestFontSelection:
    """Tests for ^A."""

    def test_full(self, parser):
        node = parser.parse("^A0N,30,40").commands[0]

        assert isinstance(node, FontSelectionNode)
        assert node.font == "0"
        assert node.orientation is Orientation.NORMAL
        assert (node.height, node.width) == (30, 40)
        assert node.parameters == ["0", "N", "30", "40"]

    def test_width_absent(self, parser):
        node = parser.parse("^ADR,36").commands[0]

        assert node.orientation is Orientation.ROTATED
        assert node.height == 36
        assert node.width is None

    def test_width_not_numeric_takes_height(self, parser):
        node = parser.parse("^ADN,36,xx").commands[0]

        assert node.width == 36

    def test_font_only(self, parser):
        node = parser.parse("^AD").commands[0]

        assert node.font == "D"
        assert node.orientation is Orientation.NORMAL
        assert node.height == 10
        assert node.width is None

    def test_bare(self, parser):
        document = parser.parse("^A")

        node = document.commands[0]
        assert node.font == "0"
        assert node.height == 10
        assert document.warnings == []

    def test_invalid_orientation(self, parser):
        node = parser.parse("^ADQ,20").commands[0]

        assert node.orientation is Orientation.NORMAL
        assert node.height == 20
