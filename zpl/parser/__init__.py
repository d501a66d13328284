"""
Parser module for ZPL syntax analysis.

This module provides the recursive descent parser that converts
tokenized input into a Document.
"""

from .command_parser import ZplParser, parse

__all__ = [
    "ZplParser",
    "parse",
]
