"""
Grammar Rules module.

This module contains all available command grammar rules.
Rules are automatically registered via the @GrammarMap.register decorator.
"""

from zpl.grammar.rules.base import GrammarRule

# Label control
from zpl.grammar.rules.label import (
    LabelEndRule,
    LabelHomeRule,
    LabelLengthRule,
    LabelStartRule,
)

# Field placement and content
from zpl.grammar.rules.field import FieldDataRule, FieldOriginRule

# Graphics
from zpl.grammar.rules.graphic_box import GraphicBoxRule

# Text
from zpl.grammar.rules.font import FontSelectionRule

# Barcodes
from zpl.grammar.rules.barcode import BarcodeRule

# Fallback (not registered)
from zpl.grammar.rules.generic import GenericCommandRule

__all__ = [
    # Base
    "GrammarRule",
    # Label control
    "LabelStartRule",
    "LabelEndRule",
    "LabelLengthRule",
    "LabelHomeRule",
    # Field
    "FieldOriginRule",
    "FieldDataRule",
    # Graphics
    "GraphicBoxRule",
    # Text
    "FontSelectionRule",
    # Barcodes
    "BarcodeRule",
    # Fallback
    "GenericCommandRule",
]
