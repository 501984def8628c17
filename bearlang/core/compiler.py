"""
Front end orchestration module for bearlang.

This module provides the high-level Compiler class that runs the scanner
and parser over source strings or files and packages the outcome.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ..frontend.lexer import Scanner, Token, tokenize
from ..frontend.parser import Parser
from ..syntax import Program
from ..utils.settings import Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


class SourceFileError(Exception):
    """Exception raised when a source file cannot be used."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class ParseError(Exception):
    """Exception raised when a parse produced diagnostics.

    Attributes:
        errors: The diagnostics, in the order they were recorded
        filename: Source name used in the message
    """

    def __init__(self, errors: List[str], filename: str = "<input>"):
        self.errors = list(errors)
        self.filename = filename
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        lines = [f"{self.filename}: {len(self.errors)} parse error(s)"]
        lines.extend(f"  {msg}" for msg in self.errors)
        return "\n".join(lines)


@dataclass
class ParseResult:
    """Result of a parse operation.

    Attributes:
        program: The syntax tree (always present, possibly partial)
        errors: Diagnostics recorded during the pass
        filename: Name of the parsed source
    """
    program: Program
    errors: List[str] = field(default_factory=list)
    filename: str = "<input>"

    @property
    def success(self) -> bool:
        """True when the pass recorded no diagnostics."""
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise ParseError if any diagnostics were recorded."""
        if self.errors:
            raise ParseError(self.errors, self.filename)


class Compiler:
    """Main entry point for the bearlang front end.

    Each call builds a fresh Scanner/Parser pair, so one Compiler can be
    reused for any number of inputs.

    Example:
        >>> compiler = Compiler()
        >>> result = compiler.parse("let x: u8 = 1 + 2;")
        >>> result.success
        True
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the compiler.

        Args:
            settings: Front end settings (defaults to DEFAULT_SETTINGS)
        """
        self.settings = settings or DEFAULT_SETTINGS

    def tokenize(self, source: str) -> List[Token]:
        """Scan source into a token list ending with EOF."""
        return tokenize(source)

    def parse(self, source: str, filename: str = "<input>") -> ParseResult:
        """Parse BearLang source into a syntax tree.

        Args:
            source: BearLang source code string
            filename: Source name for messages

        Returns:
            ParseResult with the program and the diagnostics
        """
        parser = Parser(Scanner(source), self.settings)
        program = parser.parse_program()
        errors = parser.errors()

        logger.debug(
            "parsed %s: %d statement(s), %d error(s)",
            filename, len(program.statements), len(errors),
        )
        return ParseResult(program=program, errors=errors, filename=filename)

    def read_source(self, path: Union[str, Path]) -> str:
        """Read a source file after checking its suffix.

        Raises:
            SourceFileError: If the suffix is wrong or the file is unreadable
        """
        path = Path(path)
        if path.suffix != self.settings.source_suffix:
            raise SourceFileError(
                f"expected a {self.settings.source_suffix} source file", path
            )
        try:
            return path.read_text(encoding=self.settings.encoding)
        except FileNotFoundError as e:
            raise SourceFileError("file not found", path) from e
        except (OSError, UnicodeDecodeError) as e:
            raise SourceFileError(f"cannot read file: {e}", path) from e

    def parse_file(self, path: Union[str, Path]) -> ParseResult:
        """Read and parse a source file.

        Raises:
            SourceFileError: If the file cannot be read
        """
        path = Path(path)
        logger.info("parsing %s", path)
        return self.parse(self.read_source(path), filename=str(path))
