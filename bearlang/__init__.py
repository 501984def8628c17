"""
bearlang - BearLang front end

Scanner and Pratt parser for BearLang, a small statically-typed scripting
language. Source text is scanned into tokens and parsed into a syntax tree
for later compiler stages.

Example:
    >>> from bearlang import Compiler
    >>> result = Compiler().parse("let x: u8 = 1 + 2 * 3;")
    >>> if result.success:
    ...     print(render(result.program))

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "bearlang Team"

from .frontend import Scanner, Parser, Token, TokenKind
from .core import Compiler, ParseResult, ParseError, SourceFileError
from .syntax import render

__all__ = [
    "__version__",
    "__author__",
    "Scanner",
    "Parser",
    "Token",
    "TokenKind",
    "Compiler",
    "ParseResult",
    "ParseError",
    "SourceFileError",
    "render",
]
