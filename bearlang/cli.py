"""
Command-line interface for bearlang.

Provides the main entry point with subcommands for the interactive token
read loop, dumping the tokens of a file and parsing a file.
"""

import argparse
import logging
import sys
from typing import TextIO

from .core import Compiler, ParseError, SourceFileError
from .frontend import Scanner, Token
from .syntax import render
from .utils.settings import Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="bearlang",
        description="bearlang: BearLang scanner and parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m bearlang repl
  python -m bearlang tokens example.bl
  python -m bearlang parse example.bl --strict
        """
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose (debug) logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Read loop command
    subparsers.add_parser(
        "repl",
        help="Read lines from stdin and print their tokens"
    )

    # Tokens command
    tokens_parser = subparsers.add_parser(
        "tokens",
        help="Print the tokens of a source file"
    )
    tokens_parser.add_argument(
        "input",
        type=str,
        help="Input .bl source file"
    )

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a source file and print the rendered tree"
    )
    parse_parser.add_argument(
        "input",
        type=str,
        help="Input .bl source file"
    )
    parse_parser.add_argument(
        "--strict",
        action="store_true",
        help="Do not print the tree when the parse recorded errors"
    )
    parse_parser.add_argument(
        "--no-capture-values",
        action="store_true",
        help="Skip over let/return values instead of parsing them"
    )
    parse_parser.add_argument(
        "--no-recovery",
        action="store_true",
        help="Do not resynchronise at ';' after a failed statement"
    )

    # Version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def format_token(token: Token) -> str:
    """Format a token as printed by the read loop."""
    return f"{{Type:{token.kind.name} Literal:{token.text}}}"


def run_repl(stdin: TextIO, stdout: TextIO, prompt: str = DEFAULT_SETTINGS.prompt) -> None:
    """Scan each input line with a fresh scanner and print its tokens.

    Runs until ``stdin`` is exhausted. Nothing is carried between lines.
    """
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return
        for token in Scanner(line):
            stdout.write(format_token(token) + "\n")


def handle_repl(args: argparse.Namespace) -> int:
    """Handle the repl command."""
    print("This is the REPL of BearLang")
    print("Type in a command")
    run_repl(sys.stdin, sys.stdout, DEFAULT_SETTINGS.prompt)
    return 0


def handle_tokens(args: argparse.Namespace) -> int:
    """Handle the tokens command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    compiler = Compiler()
    try:
        source = compiler.read_source(args.input)
    except SourceFileError as e:
        print(f"[bearlang] Error: {e}", file=sys.stderr)
        return 1

    for token in compiler.tokenize(source):
        print(format_token(token))
    return 0


def handle_parse(args: argparse.Namespace) -> int:
    """Handle the parse command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 when the parse recorded no errors)
    """
    settings = Settings(
        capture_values=not args.no_capture_values,
        error_recovery=not args.no_recovery,
    )
    compiler = Compiler(settings)

    try:
        result = compiler.parse_file(args.input)
    except SourceFileError as e:
        print(f"[bearlang] Error: {e}", file=sys.stderr)
        return 1

    if not (args.strict and result.errors):
        for stmt in result.program.statements:
            print(render(stmt))

    try:
        result.raise_for_errors()
    except ParseError as e:
        print(f"[bearlang] {e}", file=sys.stderr)
        return 1

    logger.info("%s: %d statement(s)", result.filename, len(result.program.statements))
    return 0


def handle_version(args: argparse.Namespace) -> int:
    """Handle the version command."""
    from . import __version__, __author__
    print(f"bearlang version {__version__}")
    print(f"Author: {__author__}")
    return 0


def main(argv: list = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(name)s] %(levelname)s: %(message)s",
    )

    if args.command == "repl":
        return handle_repl(args)
    elif args.command == "tokens":
        return handle_tokens(args)
    elif args.command == "parse":
        return handle_parse(args)
    elif args.command == "version":
        return handle_version(args)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())
