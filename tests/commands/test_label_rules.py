"""
Tests for label control commands - ^XA, ^XZ, ^LL, ^LH.
"""

from zpl.syntax_tree.nodes import (
    CommandKind,
    LabelEndNode,
    LabelHomeNode,
    LabelLengthNode,
    LabelStartNode,
)


class TestLabelStartEnd:
    """Tests for ^XA and ^XZ."""

    def test_label_start(self, parser):
        node = parser.parse("^XA").commands[0]

        assert isinstance(node, LabelStartNode)
        assert node.kind is CommandKind.LABEL_START
        assert node.code == "XA"
        assert node.raw == "^XA"
        assert node.parameters == []

    def test_label_start_keeps_parameters(self, parser):
        node = parser.parse("^XA1").commands[0]

        assert node.parameters == ["1"]

    def test_label_end(self, parser):
        node = parser.parse("^XZ").commands[0]

        assert isinstance(node, LabelEndNode)
        assert node.raw == "^XZ"


class TestLabelLength:
    """Tests for ^LL."""

    def test_length(self, parser):
        node = parser.parse("^LL1200").commands[0]

        assert isinstance(node, LabelLengthNode)
        assert node.length == 1200
        assert node.parameters == ["1200"]

    def test_missing_length_defaults(self, parser):
        document = parser.parse("^LL")

        assert document.commands[0].length == 100
        assert document.errors == []

    def test_non_numeric_length_defaults(self, parser):
        assert parser.parse("^LLabc").commands[0].length == 100

    def test_numeric_prefix(self, parser):
        """Leading digits are used, like parseInt."""
        assert parser.parse("^LL50abc").commands[0].length == 50

    def test_oversized_length_defaults(self, parser):
        """A number too long to convert falls back like a non-number."""
        document = parser.parse("^LL" + "1" * 5000)

        assert [cmd.kind for cmd in document.commands] == [CommandKind.LABEL_LENGTH]
        assert document.commands[0].length == 100
        assert document.errors == []



class TestLabelHome:
    """Tests for ^LH."""

    def test_home(self, parser):
        document = parser.parse("^LH30,40")

        node = document.commands[0]
        assert isinstance(node, LabelHomeNode)
        assert (node.x, node.y) == (30, 40)
        assert document.errors == []

    def test_missing_y(self, parser):
        document = parser.parse("^LH30")

        node = document.commands[0]
        assert (node.x, node.y) == (30, 0)
        assert len(document.errors) == 1
        assert "LH" in document.errors[0].message

    def test_negative_values(self, parser):
        node = parser.parse("^LH-5,+7").commands[0]

        assert (node.x, node.y) == (-5, 7)
