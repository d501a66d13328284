"""
Tests for field commands - ^FO and ^FD.
"""

from zpl.lexer import Position
from zpl.syntax_tree.nodes import FieldDataNode, FieldOriginNode


class TestFieldOrigin:
    """Tests for ^FO."""

    def test_origin(self, parser):
        document = parser.parse("^FO50,60")

        node = document.commands[0]
        assert isinstance(node, FieldOriginNode)
        assert (node.x, node.y) == (50, 60)
        assert node.parameters == ["50", "60"]
        assert document.errors == []

    def test_missing_both(self, parser):
        document = parser.parse("^FO")

        node = document.commands[0]
        assert (node.x, node.y) == (0, 0)
        assert len(document.errors) == 1
        assert document.errors[0].message == "FO command requires x and y parameters"

    def test_extra_parameters_kept(self, parser):
        node = parser.parse("^FO1,2,3").commands[0]

        assert node.parameters == ["1", "2", "3"]
        assert (node.x, node.y) == (1, 2)

    def test_oversized_coordinate_defaults(self, parser):
        """A coordinate too long to convert becomes 0 and the node is kept."""
        document = parser.parse("^XA\n^FO" + "9" * 5000 + ",10\n^XZ")

        assert [cmd.code for cmd in document.commands] == ["XA", "FO", "XZ"]
        node = document.commands[1]
        assert isinstance(node, FieldOriginNode)
        assert (node.x, node.y) == (0, 10)
        assert document.errors == []



class TestFieldData:
    """Tests for ^FD."""

    def test_content(self, parser):
        node = parser.parse("^FDHello World^FS").commands[0]

        assert isinstance(node, FieldDataNode)
        assert node.content == "Hello World"
        assert node.parameters == ["Hello World"]
        assert node.raw == "^FD"
        assert node.position == Position(1, 1, 0)

    def test_content_with_commas(self, parser):
        node = parser.parse("^FDa,b c^FS").commands[0]

        assert node.content == "a,b c"

    def test_multiline_content(self, parser):
        document = parser.parse("^FDfirst\nsecond^FS")

        assert len(document.commands) == 1
        assert document.commands[0].content == "first\nsecond"
        assert document.commands[0].stop_command is True

    def test_content_keeps_trailing_spaces(self, parser):
        node = parser.parse("^FDAB  ^FS").commands[0]

        assert node.content == "AB  "
        assert node.stop_command is True


    def test_empty_content(self, parser):
        node = parser.parse("^FD^FS").commands[0]

        assert node.content == ""
        assert node.parameters == []
        assert node.stop_command is True

    def test_field_stop_never_a_node(self, parser):
        document = parser.parse("^XA^FDx^FS^XZ")

        assert [cmd.code for cmd in document.commands] == ["XA", "FD", "XZ"]
        assert document.warnings == []
