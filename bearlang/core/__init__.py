"""
Core module for bearlang.

This module contains the front end orchestration: the Compiler facade,
its result type and the exceptions raised at the outer surface.
"""

from .compiler import Compiler, ParseResult, ParseError, SourceFileError

__all__ = [
    "Compiler",
    "ParseResult",
    "ParseError",
    "SourceFileError",
]
