"""
Unit tests for the bearlang command-line interface.
"""

import io

import pytest
from bearlang.cli import create_parser, format_token, main, run_repl
from bearlang.frontend import Token, TokenKind


class TestArgumentParser:
    """Tests for argument parsing."""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_parse_flags(self):
        args = create_parser().parse_args(["-v", "parse", "a.bl", "--strict", "--no-recovery"])
        assert args.verbose
        assert args.command == "parse"
        assert args.strict
        assert args.no_recovery
        assert not args.no_capture_values


class TestReadLoop:
    """Tests for the interactive read loop."""

    def test_format_token(self):
        assert format_token(Token(TokenKind.LET, "let")) == "{Type:LET Literal:let}"

    def test_each_line_scanned_separately(self):
        stdin = io.StringIO("let x\n== 5\n")
        stdout = io.StringIO()
        run_repl(stdin, stdout, prompt=">>")

        assert stdout.getvalue() == (
            ">>{Type:LET Literal:let}\n"
            "{Type:IDENTIFIER Literal:x}\n"
            ">>{Type:EQU Literal:==}\n"
            "{Type:INT Literal:5}\n"
            ">>"
        )

    def test_empty_input(self):
        stdout = io.StringIO()
        run_repl(io.StringIO(""), stdout)
        assert stdout.getvalue() == ">>"


class TestCommands:
    """Tests for the subcommand handlers."""

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert "bearlang version" in capsys.readouterr().out

    def test_tokens(self, capsys, sample_source_file):
        assert main(["tokens", str(sample_source_file)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "{Type:LET Literal:let}"
        assert lines[-1] == "{Type:EOF Literal:}"

    def test_parse(self, capsys, sample_source_file):
        assert main(["parse", str(sample_source_file)]) == 0
        out = capsys.readouterr().out
        assert out.splitlines() == ["let x: u8 = (1 + (2 * 3));", "return x;"]

    def test_parse_with_errors(self, capsys, temp_dir):
        path = temp_dir / "bad.bl"
        path.write_text("let : u8 = 1;\ny;\n")
        assert main(["parse", str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out.splitlines() == ["y"]
        assert "1 parse error(s)" in captured.err
        assert "expected next token to be IDENTIFIER" in captured.err

    def test_parse_strict_hides_tree(self, capsys, temp_dir):
        path = temp_dir / "bad.bl"
        path.write_text("let : u8 = 1;\ny;\n")
        assert main(["parse", "--strict", str(path)]) == 1
        assert capsys.readouterr().out == ""

    def test_missing_file(self, capsys, temp_dir):
        assert main(["parse", str(temp_dir / "nope.bl")]) == 1
        assert "file not found" in capsys.readouterr().err


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
