"""
Frontend module for bearlang.

This module provides the scanner and parser components of the bearlang
front end: source text is scanned into tokens, and tokens are parsed into
a syntax tree.
"""

from .lexer import Scanner, Token, TokenKind, KEYWORDS, TYPE_TAGS, lookup_ident, tokenize
from .parser import Parser, Precedence, PRECEDENCES, parse_integer

__all__ = [
    # Scanner components
    "Scanner",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "TYPE_TAGS",
    "lookup_ident",
    "tokenize",
    # Parser components
    "Parser",
    "Precedence",
    "PRECEDENCES",
    "parse_integer",
]
