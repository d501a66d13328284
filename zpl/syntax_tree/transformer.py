"""
AST Transformer for converting parsed documents to plain data.

This module turns Document and CommandNode values into dict/list/primitive
trees that can be handed to json.dumps or any other serializer.
"""

import json
from dataclasses import fields
from enum import Enum
from typing import Any

from zpl.diagnostics import Diagnostic
from zpl.lexer import Position
from zpl.syntax_tree.nodes import CommandNode, Document

# Python attribute name -> interchange key
_KEY_NAMES = {
    "code": "command",
    "stop_command": "stopCommand",
    "print_interpretation_line": "printInterpretationLine",
    "print_above_code": "printAboveCode",
    "label_width": "labelWidth",
    "label_length": "labelLength",
}


class ASTTransformer:
    """
    Transforms AST nodes into plain data.

    Provides methods to convert:
    - a whole Document (to_dict / to_json)
    - a single command node (command_to_dict)
    - positions and diagnostics
    """

    def to_dict(self, document: Document) -> dict[str, Any]:
        """
        Transform a Document into a nested dict.

        Args:
            document: The parsed document

        Returns:
            Dictionary with "type", "commands" and "metadata" keys
        """
        meta = document.metadata
        metadata: dict[str, Any] = {
            "source": meta.source,
            "errors": [self.diagnostic_to_dict(e) for e in meta.errors],
            "warnings": [self.diagnostic_to_dict(w) for w in meta.warnings],
        }
        if meta.label_width is not None:
            metadata[_KEY_NAMES["label_width"]] = meta.label_width
        if meta.label_length is not None:
            metadata[_KEY_NAMES["label_length"]] = meta.label_length

        return {
            "type": document.kind,
            "commands": [self.command_to_dict(cmd) for cmd in document.commands],
            "metadata": metadata,
        }

    def to_json(self, document: Document, indent: int | None = 2) -> str:
        """Serialize a Document to JSON text."""
        return json.dumps(self.to_dict(document), indent=indent, ensure_ascii=False)

    def command_to_dict(self, node: CommandNode) -> dict[str, Any]:
        """
        Transform a command node into a flat dict.

        Optional fields left as None are omitted.
        """
        result: dict[str, Any] = {"type": node.kind.value}
        for f in fields(node):
            value = getattr(node, f.name)
            if value is None:
                continue
            result[_KEY_NAMES.get(f.name, f.name)] = self._value_to_plain(value)
        return result

    def position_to_dict(self, position: Position) -> dict[str, int]:
        return {
            "line": position.line,
            "column": position.column,
            "offset": position.offset,
        }

    def diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, Any]:
        result: dict[str, Any] = {
            "message": diagnostic.message,
            "position": self.position_to_dict(diagnostic.position),
            "severity": diagnostic.severity.value,
            "code": diagnostic.code,
        }
        if diagnostic.suggestion is not None:
            result["suggestion"] = diagnostic.suggestion
        return result

    def _value_to_plain(self, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, Position):
            return self.position_to_dict(value)
        if isinstance(value, list):
            return [self._value_to_plain(v) for v in value]
        return value
