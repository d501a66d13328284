"""
Grammar Map - Registry for command grammar rules.

This module provides a decorator-based registration system
for mapping command codes to their grammar rule classes.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zpl.grammar.rules.base import GrammarRule


class GrammarMap:
    """
    Registry for mapping command codes to grammar rules.

    Usage:
        @GrammarMap.register
        class MyRule(GrammarRule):
            codes = ("XX",)
            ...
    """

    _registry: dict[str, type["GrammarRule"]] = {}

    @classmethod
    def register(cls, rule_class: type["GrammarRule"]) -> type["GrammarRule"]:
        """
        Register a grammar rule class with its command codes.

        Args:
            rule_class: The GrammarRule subclass to register

        Returns:
            The same rule class (for use as a decorator)

        Raises:
            ValueError: If the class declares no codes
        """
        codes = getattr(rule_class, "codes", ())
        if not codes:
            raise ValueError(f"{rule_class.__name__} declares no command codes")

        for code in codes:
            cls._registry[code.upper()] = rule_class

        return rule_class

    @classmethod
    def get(cls, code: str) -> type["GrammarRule"] | None:
        """
        Get the grammar rule for a command code.

        Args:
            code: The command code to look up (e.g. "FO")

        Returns:
            The rule class or None if the code has no rule
        """
        return cls._registry.get(code.upper())

    @classmethod
    def unregister(cls, code: str) -> None:
        """Remove the rule for a command code, if any."""
        cls._registry.pop(code.upper(), None)

    @classmethod
    def list(cls) -> list[str]:
        """
        List all registered command codes.

        Returns:
            Sorted list of codes
        """
        return sorted(cls._registry.keys())
