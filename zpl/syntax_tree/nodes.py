"""
AST Node definitions for the ZPL parser.

This module defines one node type per supported command kind, a generic
node for everything else, and the Document root that holds them.
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from zpl.diagnostics import Diagnostic
from zpl.lexer import Position


class CommandKind(Enum):
    """Kinds of command nodes."""

    LABEL_START = "LABEL_START"
    LABEL_END = "LABEL_END"
    LABEL_LENGTH = "LABEL_LENGTH"
    LABEL_HOME = "LABEL_HOME"
    FIELD_ORIGIN = "FIELD_ORIGIN"
    GRAPHIC_BOX = "GRAPHIC_BOX"
    FIELD_DATA = "FIELD_DATA"
    FONT_SELECTION = "FONT_SELECTION"
    BARCODE = "BARCODE"
    GENERIC_COMMAND = "GENERIC_COMMAND"


class Orientation(Enum):
    """Field rotation."""

    NORMAL = "N"
    ROTATED = "R"  # 90 degrees clockwise
    INVERTED = "I"  # 180 degrees
    BOTTOM_UP = "B"  # 270 degrees

    @classmethod
    def parse(cls, value: str | None) -> "Orientation":
        for member in cls:
            if member.value == value:
                return member
        return cls.NORMAL


class LineColor(Enum):
    """Graphic box line color."""

    BLACK = "B"
    WHITE = "W"

    @classmethod
    def parse(cls, value: str | None) -> "LineColor":
        return cls.WHITE if value == cls.WHITE.value else cls.BLACK


@dataclass
class CommandNode(ABC):
    """
    Base class for all command nodes.

    `position` is where the command marker sits in the source, and
    `parameters` keeps the raw parameter strings in source order.
    """

    kind: ClassVar[CommandKind]

    code: str
    raw: str
    position: Position
    parameters: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw}, {self.parameters})"


@dataclass(repr=False)
class LabelStartNode(CommandNode):
    """^XA - start of a label."""

    kind: ClassVar[CommandKind] = CommandKind.LABEL_START


@dataclass(repr=False)
class LabelEndNode(CommandNode):
    """^XZ - end of a label."""

    kind: ClassVar[CommandKind] = CommandKind.LABEL_END


@dataclass(repr=False)
class LabelLengthNode(CommandNode):
    """^LL - label length in dots."""

    kind: ClassVar[CommandKind] = CommandKind.LABEL_LENGTH

    length: int = 100


@dataclass(repr=False)
class LabelHomeNode(CommandNode):
    """^LH - label home offset."""

    kind: ClassVar[CommandKind] = CommandKind.LABEL_HOME

    x: int = 0
    y: int = 0


@dataclass(repr=False)
class FieldOriginNode(CommandNode):
    """^FO - upper left corner of the next field."""

    kind: ClassVar[CommandKind] = CommandKind.FIELD_ORIGIN

    x: int = 0
    y: int = 0


@dataclass(repr=False)
class GraphicBoxNode(CommandNode):
    """^GB - box or line."""

    kind: ClassVar[CommandKind] = CommandKind.GRAPHIC_BOX

    width: int = 1
    height: int = 1
    thickness: int = 1
    color: LineColor = LineColor.BLACK
    rounding: int | None = None


@dataclass(repr=False)
class FieldDataNode(CommandNode):
    """^FD - field data, with the ^FS that closes it folded in."""

    kind: ClassVar[CommandKind] = CommandKind.FIELD_DATA

    content: str = ""
    stop_command: bool = False


@dataclass(repr=False)
class FontSelectionNode(CommandNode):
    """^A - scalable/bitmapped font for the next field."""

    kind: ClassVar[CommandKind] = CommandKind.FONT_SELECTION

    font: str = "0"
    orientation: Orientation = Orientation.NORMAL
    height: int = 10
    width: int | None = None


@dataclass(repr=False)
class BarcodeNode(CommandNode):
    """^BC, ^B3, ^BN - barcode field, with the data of the ^FD that follows it."""

    kind: ClassVar[CommandKind] = CommandKind.BARCODE

    orientation: Orientation = Orientation.NORMAL
    height: int = 10
    print_interpretation_line: bool = True
    print_above_code: bool = False
    mode: str | None = None
    data: str = ""


@dataclass(repr=False)
class GenericCommandNode(CommandNode):
    """Any command without a dedicated grammar rule."""

    kind: ClassVar[CommandKind] = CommandKind.GENERIC_COMMAND


@dataclass
class DocumentMetadata:
    """Diagnostics and derived values for a parsed document."""

    source: str
    errors: list[Diagnostic] = field(default_factory=list)
    warnings: list[Diagnostic] = field(default_factory=list)
    label_width: int | None = None
    label_length: int | None = None


@dataclass
class Document:
    """
    Root of a parsed ZPL source.

    Structure:
        commands in source order + metadata
    """

    kind: ClassVar[str] = "ZPL_DOCUMENT"

    commands: list[CommandNode] = field(default_factory=list)
    metadata: DocumentMetadata = field(default_factory=lambda: DocumentMetadata(""))

    @property
    def errors(self) -> list[Diagnostic]:
        return self.metadata.errors

    @property
    def warnings(self) -> list[Diagnostic]:
        return self.metadata.warnings

    @property
    def has_errors(self) -> bool:
        return bool(self.metadata.errors)

    def commands_of(self, kind: CommandKind) -> list[CommandNode]:
        """Return the commands of the given kind, in source order."""
        return [cmd for cmd in self.commands if cmd.kind is kind]

    def to_dict(self) -> dict[str, Any]:
        from zpl.syntax_tree.transformer import ASTTransformer

        return ASTTransformer().to_dict(self)

    def to_json(self, indent: int | None = 2) -> str:
        from zpl.syntax_tree.transformer import ASTTransformer

        return ASTTransformer().to_json(self, indent=indent)

    def __repr__(self) -> str:
        return " ".join(cmd.raw for cmd in self.commands)
