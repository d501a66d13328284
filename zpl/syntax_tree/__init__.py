"""
Syntax Tree module for ZPL parsing.

This module defines the node types that represent parsed commands
and provides transformation utilities.

Note: Named 'syntax_tree' instead of 'ast' to avoid conflict with Python's built-in ast module.
"""

from zpl.syntax_tree.nodes import (
    BarcodeNode,
    CommandKind,
    CommandNode,
    Document,
    DocumentMetadata,
    FieldDataNode,
    FieldOriginNode,
    FontSelectionNode,
    GenericCommandNode,
    GraphicBoxNode,
    LabelEndNode,
    LabelHomeNode,
    LabelLengthNode,
    LabelStartNode,
    LineColor,
    Orientation,
)
from zpl.syntax_tree.transformer import ASTTransformer

__all__ = [
    "CommandKind",
    "CommandNode",
    "LabelStartNode",
    "LabelEndNode",
    "LabelLengthNode",
    "LabelHomeNode",
    "FieldOriginNode",
    "GraphicBoxNode",
    "FieldDataNode",
    "FontSelectionNode",
    "BarcodeNode",
    "GenericCommandNode",
    "Orientation",
    "LineColor",
    "Document",
    "DocumentMetadata",
    "ASTTransformer",
]
