"""
Parser configuration.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    """
    Options for ZplParser.

    Attributes:
        label_width_padding: Dots added to the largest field origin x when
            deriving the label width.
        default_label_length: Length used by ^LL when its parameter is
            missing or not a number.
        warn_unsupported: Emit a warning for commands without a grammar rule.
    """

    label_width_padding: int = 100
    default_label_length: int = 100
    warn_unsupported: bool = True


DEFAULT_CONFIG = ParserConfig()
