"""
Pytest configuration and shared fixtures for zpl tests.
"""

import pytest

from zpl.grammar.grammar_map import GrammarMap
from zpl.parser.command_parser import ZplParser


@pytest.fixture
def parser():
    """A parser with the default configuration."""
    return ZplParser()


@pytest.fixture
def text_label():
    """
    Simple text label.
    Contains: label start, field origin, font, field data, label end
    """
    return "^XA\n^FO50,50\n^ADN,36,20\n^FDHello World^FS\n^XZ"


@pytest.fixture
def barcode_label():
    """
    Code 128 barcode label with its data on the following line.
    """
    return "^XA\n^FO100,100\n^BCN,100,Y,N,N\n^FD123456789^FS\n^XZ"


@pytest.fixture
def broken_label():
    """
    Label whose field origin is missing the y coordinate.
    """
    return "^XA\n^FO50\n^FDTest^FS\n^XZ"


@pytest.fixture
def shipping_label():
    """
    Larger label mixing supported and unsupported commands.
    """
    return (
        "^XA\n"
        "^LH0,0\n"
        "^LL1200\n"
        "^PW812\n"
        "^FO50,50^ADN,36,20^FDHello Zombie ZPL!^FS\n"
        "^FO50,150^BCN,100,Y,N,N^FDSPOOKY123^FS\n"
        "^FO50,300^GB400,100,10,B,0^FS\n"
        "^XZ"
    )


@pytest.fixture
def register_rule():
    """
    Register grammar rules for the duration of a test.

    Usage:
        register_rule(MyRule)
    """
    registered: list[str] = []

    def _register(rule_class):
        GrammarMap.register(rule_class)
        registered.extend(rule_class.codes)
        return rule_class

    yield _register

    for code in registered:
        GrammarMap.unregister(code)
