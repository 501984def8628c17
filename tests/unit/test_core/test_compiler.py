"""
Unit tests for the Compiler facade.
"""

import pytest
from bearlang import Compiler, ParseError, SourceFileError, TokenKind
from bearlang.core import ParseResult
from bearlang.syntax import LetStatement, ReturnStatement, render
from bearlang.utils import Settings


class TestCompilerParse:
    """Tests for Compiler.parse."""

    def test_successful_parse(self, compiler):
        result = compiler.parse("let x: u8 = 1 + 2 * 3;")
        assert isinstance(result, ParseResult)
        assert result.success
        assert result.errors == []
        assert render(result.program) == "let x: u8 = (1 + (2 * 3));"

    def test_failed_parse_still_returns_program(self, compiler):
        result = compiler.parse("let : u8 = 1; y;", filename="broken.bl")
        assert not result.success
        assert len(result.errors) == 1
        assert render(result.program) == "y"
        assert result.filename == "broken.bl"

    def test_fresh_parser_per_call(self, compiler):
        """Test that diagnostics do not leak between calls."""
        assert not compiler.parse(")").success
        assert compiler.parse("x;").success

    def test_settings_are_used(self):
        compiler = Compiler(Settings(capture_values=False))
        result = compiler.parse("let x: u8 = 1 + 2;")
        assert result.program.statements[0].value is None

    def test_tokenize(self, compiler):
        tokens = compiler.tokenize("a + 1")
        assert [t.kind for t in tokens] == [
            TokenKind.IDENTIFIER, TokenKind.ADD, TokenKind.INT, TokenKind.EOF,
        ]


class TestParseResult:
    """Tests for ParseResult and ParseError."""

    def test_raise_for_errors_passes_on_success(self, compiler):
        compiler.parse("x;").raise_for_errors()

    def test_raise_for_errors(self, compiler):
        result = compiler.parse(") @", filename="bad.bl")
        with pytest.raises(ParseError) as exc_info:
            result.raise_for_errors()

        error = exc_info.value
        assert error.filename == "bad.bl"
        assert error.errors == [
            "no prefix parse function for ) found",
            "no prefix parse function for ILLEGAL found",
        ]
        assert str(error).startswith("bad.bl: 2 parse error(s)")


class TestCompilerFiles:
    """Tests for reading source files."""

    def test_parse_file(self, compiler, sample_source_file):
        result = compiler.parse_file(sample_source_file)
        assert result.success
        assert result.filename == str(sample_source_file)
        assert isinstance(result.program.statements[0], LetStatement)
        assert isinstance(result.program.statements[1], ReturnStatement)

    def test_wrong_suffix(self, compiler, temp_dir):
        path = temp_dir / "program.txt"
        path.write_text("x;")
        with pytest.raises(SourceFileError) as exc_info:
            compiler.parse_file(path)
        assert exc_info.value.path == path
        assert "expected a .bl source file" in str(exc_info.value)

    def test_missing_file(self, compiler, temp_dir):
        with pytest.raises(SourceFileError, match="file not found"):
            compiler.parse_file(temp_dir / "missing.bl")

    def test_missing_file_keeps_cause(self, compiler, temp_dir):
        with pytest.raises(SourceFileError) as exc_info:
            compiler.parse_file(temp_dir / "missing.bl")
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_undecodable_file_keeps_cause(self, compiler, temp_dir):
        path = temp_dir / "binary.bl"
        path.write_bytes(b"let x: u8 = \xff\xfe;")
        with pytest.raises(SourceFileError, match="cannot read file") as exc_info:
            compiler.parse_file(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_source_file_error_without_path(self):
        assert str(SourceFileError("boom")) == "boom"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
