"""
Grammar module for ZPL commands.

This module provides the rule registry and the per-command
grammar rules.
"""

from zpl.grammar.grammar_map import GrammarMap

__all__ = [
    "GrammarMap",
]
