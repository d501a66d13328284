"""
zpl - A parser for ZPL label markup.

This package turns ZPL source text into a typed command tree with
diagnostics, suitable for rendering or inspection by other tools.

Usage:
    from zpl import parse

    document = parse("^XA^FO50,50^ADN,36,20^FDHello^FS^XZ")
    for command in document.commands:
        print(command.kind, command.parameters)
"""

# Lazy imports to avoid circular import issues
def __getattr__(name: str):
    if name == "parse":
        from zpl.parser.command_parser import parse
        return parse
    if name == "ZplParser":
        from zpl.parser.command_parser import ZplParser
        return ZplParser
    if name == "tokenize":
        from zpl.lexer import tokenize
        return tokenize
    if name == "ZplLexer":
        from zpl.lexer import ZplLexer
        return ZplLexer
    if name == "Document":
        from zpl.syntax_tree.nodes import Document
        return Document
    if name == "ParserConfig":
        from zpl.config import ParserConfig
        return ParserConfig
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "parse",
    "tokenize",
    "ZplParser",
    "ZplLexer",
    "Document",
    "ParserConfig",
]

__version__ = "0.1.0"
