"""
Test suite for bearlang.

This package contains tests for the bearlang front end including:
- Unit tests for the scanner, parser and syntax tree
- Tests for the Compiler facade and the command-line interface
- Fixture tests comparing rendered programs with expected output
"""

__version__ = "0.1.0"
