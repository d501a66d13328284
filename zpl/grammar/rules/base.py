"""
Base class for all grammar rules.

This module defines the abstract base class that all command
grammar rules inherit from, plus the value helpers they share.
"""

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from zpl.lexer import COMMAND_MARKER, Token

if TYPE_CHECKING:
    from zpl.grammar.context import ParseContext, ParseFailure
    from zpl.syntax_tree.nodes import CommandNode

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: str | None, default: int) -> int:
    """
    Parse a base-10 integer prefix.

    "50" -> 50, "50abc" -> 50, "abc" / None -> default.
    """
    if value is None:
        return default
    match = _INT_PREFIX.match(value)
    if match is None:
        return default
    try:
        return int(match.group(1))
    except ValueError:
        # past the interpreter's int string conversion limit
        return default


def parse_bool(value: str | None, default: bool) -> bool:
    """Y -> True, N -> False, anything else -> default."""
    if value == "Y":
        return True
    if value == "N":
        return False
    return default


def param_at(parameters: list[str], index: int) -> str | None:
    """Return the positional parameter or None when absent."""
    if index < len(parameters):
        return parameters[index]
    return None


class GrammarRule(ABC):
    """
    Abstract base class for command grammar rules.

    All rules must implement:
    - parse(ctx, start, code_token): consume tokens and build a node
    - codes: tuple of command codes handled (class attribute)

    The marker and code tokens are already consumed when parse() runs;
    the cursor sits on whatever follows the code.
    """

    # Command codes (subclasses should override)
    codes: tuple[str, ...] = ()

    @abstractmethod
    def parse(
        self, ctx: "ParseContext", start: Token, code_token: Token
    ) -> "CommandNode | ParseFailure":
        """
        Build the node for one command.

        Args:
            ctx: The per-call parse context
            start: The command marker token
            code_token: The command code token

        Returns:
            The command node, or a ParseFailure to trigger recovery
        """

    @staticmethod
    def base_fields(
        start: Token, code_token: Token, parameters: list[str] | None = None
    ) -> dict[str, Any]:
        """Fields shared by every command node."""
        return {
            "code": code_token.value,
            "raw": f"{COMMAND_MARKER}{code_token.value}",
            "position": start.position,
            "parameters": parameters if parameters is not None else [],
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.codes})"
