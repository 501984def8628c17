"""
bearlang Front End Performance Checks

Scanning and parsing are single-pass with one token of lookahead, so time
should grow roughly linearly with input size and parsing should not hold
on to more memory than the tree it builds.
"""

import time

import psutil
import pytest

from bearlang.frontend import Scanner, Parser, tokenize

STATEMENT = "let value_1: i64 = (alpha + 42) * -beta / 7 == gamma;\n"


def measure(func, source: str, iterations: int = 3) -> float:
    """Return the best wall-clock time of ``func(source)`` in seconds."""
    best = float("inf")
    for _ in range(iterations):
        start = time.perf_counter()
        func(source)
        best = min(best, time.perf_counter() - start)
    return best


def parse_source(source: str):
    parser = Parser(Scanner(source))
    program = parser.parse_program()
    assert parser.errors() == []
    return program


class TestScalability:
    """Growth of run time with input size."""

    @pytest.mark.parametrize("func", [tokenize, parse_source], ids=["scan", "parse"])
    def test_roughly_linear(self, func):
        small = STATEMENT * 500
        large = STATEMENT * 5000

        small_time = measure(func, small)
        large_time = measure(func, large)

        # 10x the input; allow generous slack for timer noise
        assert large_time < max(small_time, 1e-4) * 40

    def test_statement_count(self):
        program = parse_source(STATEMENT * 1000)
        assert len(program.statements) == 1000


class TestMemory:
    """Resident memory while parsing a large input."""

    def test_parse_memory_bounded(self):
        process = psutil.Process()
        source = STATEMENT * 20000

        before = process.memory_info().rss
        program = parse_source(source)
        after = process.memory_info().rss

        assert len(program.statements) == 20000
        # Tree for 20k statements stays well under 512 MiB
        assert after - before < 512 * 1024 * 1024
