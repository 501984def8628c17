"""
Pytest configuration and fixtures for bearlang tests.
"""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def sample_source_file(temp_dir):
    """Create a sample BearLang file for testing."""
    bl_file = temp_dir / "sample.bl"
    bl_file.write_text("let x: u8 = 1 + 2 * 3;\nreturn x;\n")
    return bl_file


@pytest.fixture
def fixtures_dir():
    """Directory holding the .bl fixtures and their expected output."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def compiler():
    """Provide a Compiler instance."""
    from bearlang import Compiler
    return Compiler()


@pytest.fixture
def parse():
    """Parse source with a fresh parser and return (program, errors)."""
    from bearlang.frontend import Scanner, Parser

    def _parse(source, settings=None):
        parser = Parser(Scanner(source), settings)
        program = parser.parse_program()
        return program, parser.errors()

    return _parse
